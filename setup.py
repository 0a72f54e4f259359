#!/usr/bin/env python3
"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject

Extra supported commands are:
* pypi, to generate sdist, bdist_wheel, and push to PyPi
"""

import os
import re
import shutil
import sys
from pathlib import Path
from subprocess import run

from setuptools import find_packages, setup


class TempWorkDir:
    """Switches the working directory to be the one on which this file lives,
       while within the 'with' block.
    """
    def __init__(self, new=None):
        self.original = None
        self.new = new or str(Path(__file__).parent.resolve())

    def __enter__(self):
        self.original = str(Path('.').resolve())
        os.makedirs(self.new, exist_ok=True)
        os.chdir(self.new)
        return self

    def __exit__(self, *args):
        os.chdir(self.original)


LIBRARY_DIR = Path('unicodec')


def main(argv):
    if len(argv) >= 2 and argv[1] == 'pypi':
        # Try importing the library to assert it has no errors
        try:
            import unicodec
        except ImportError:
            print('Packaging for PyPi aborted, importing the module failed.')
            return

        remove_dirs = ['__pycache__', 'build', 'dist', 'Unicodec.egg-info']
        for root, _dirs, _files in os.walk(LIBRARY_DIR, topdown=False):
            # setuptools is including __pycache__ for some reason
            if root.endswith('/__pycache__'):
                remove_dirs.append(root)
        for x in remove_dirs:
            shutil.rmtree(x, ignore_errors=True)

        run('python3 setup.py sdist', shell=True)
        run('python3 setup.py bdist_wheel', shell=True)
        run('twine upload dist/*', shell=True)
        for x in ('build', 'dist', 'Unicodec.egg-info'):
            shutil.rmtree(x, ignore_errors=True)

    else:
        # Get the long description from the README file
        with open('README.rst', 'r', encoding='utf-8') as f:
            long_description = f.read()

        with open('unicodec/version.py', 'r', encoding='utf-8') as f:
            version = re.search(r"^__version__\s*=\s*'(.*)'.*$",
                                f.read(), flags=re.MULTILINE).group(1)
        setup(
            name='Unicodec',
            version=version,
            description="Strict UTF-8, UTF-16 and UTF-32 transcoding for Python 3",
            long_description=long_description,

            license='MIT',

            python_requires='>=3.7',

            # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
            classifiers=[
                'Development Status :: 5 - Production/Stable',

                'Intended Audience :: Developers',
                'Topic :: Text Processing',

                'License :: OSI Approved :: MIT License',

                'Programming Language :: Python :: 3',
            ],
            keywords='unicode utf-8 utf-16 utf-32 transcoding codec surrogate',
            packages=find_packages(exclude=[
                'unicodec_*', 'tests*'
            ]),
            install_requires=[],
            extras_require={
                'tests': ['pytest', 'hypothesis']
            }
        )


if __name__ == '__main__':
    with TempWorkDir():
        main(sys.argv)
