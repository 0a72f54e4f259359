import abc
import logging

from .. import helpers
from ..errors import TranscodeError, AllocationError, MeasurementMismatchError
from ..extensions import UnitReader
from ..result import Result

__log__ = logging.getLogger(__name__)


class BaseCodec(abc.ABC):
    """
    Converts null-terminated code unit sequences from one encoding
    form to another in two passes.

    The first pass (`measure`) validates the whole input and counts
    the output units without writing anything. Only if it succeeds
    does the second pass (`materialize`) allocate a buffer of exactly
    that size and fill it. Both passes read the input through the same
    `read_scalar`, so they can never disagree on what is valid.

    Codecs hold no state, and a single instance may be shared by
    any number of threads.
    """
    @staticmethod
    @abc.abstractmethod
    def source():
        """
        Returns the `Encoding` this codec reads.
        """
        raise NotImplementedError

    @staticmethod
    @abc.abstractmethod
    def target():
        """
        Returns the `Encoding` this codec writes.
        """
        raise NotImplementedError

    @staticmethod
    @abc.abstractmethod
    def status_codes():
        """
        Returns the ``{ErrorKind: int}`` mapping used to turn errors into
        status codes. Every kind the codec can fail with must be present.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def read_scalar(self, reader):
        """
        Consumes one complete construct from the ``reader`` and returns
        the scalar value it encodes.

        Should raise a `MalformedInputError` without consuming anything
        when the construct is not valid.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def unit_cost(self, scalar):
        """
        Returns how many target code units ``scalar`` needs.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def write_scalar(self, buffer, index, scalar):
        """
        Encodes ``scalar`` at ``buffer[index]``.

        Should return the index right after the written units.
        """
        raise NotImplementedError

    def measure(self, source):
        """
        Validates the entire ``source`` and returns how many target units
        its conversion needs, not counting the terminator.
        """
        length = 0
        with UnitReader(source, self.source()) as reader:
            while not reader.at_end():
                length += self.unit_cost(self.read_scalar(reader))

        return length

    def materialize(self, source, length):
        """
        Converts ``source`` into a new buffer of ``length`` units plus
        the terminator. ``length`` must come from `measure`.
        """
        buffer = helpers.allocate(self.target(), length + 1)
        index = 0
        overflowed = False
        try:
            with UnitReader(source, self.source()) as reader:
                while not reader.at_end():
                    scalar = self.read_scalar(reader)
                    index = self.write_scalar(buffer, index, scalar)
        except TranscodeError:
            __log__.warning('Input of %s changed while it was being '
                            'converted, discarding the output',
                            type(self).__name__)
            del buffer
            raise
        except IndexError:
            overflowed = True

        # Raised outside the handler so no traceback keeps the buffer alive
        if overflowed or index != length:
            del buffer
            raise MeasurementMismatchError(length, None if overflowed else index)

        buffer[length] = 0
        if isinstance(buffer, bytearray):
            return bytes(buffer)
        return buffer

    def convert(self, source):
        """
        Converts ``source`` and returns a `Result`.

        Either the whole input is converted or nothing is: on failure
        the result carries the error and no output.
        """
        try:
            length = self.measure(source)
            __log__.debug('%s needs %d units', type(self).__name__, length)
            try:
                units = self.materialize(source, length)
            except MemoryError as e:
                raise AllocationError(length + 1) from e
        except TranscodeError as e:
            __log__.debug('%s rejected input: %s', type(self).__name__, e)
            return Result.failure(e, self.status_codes())

        return Result.success(units)

    def __call__(self, source):
        return self.convert(source)
