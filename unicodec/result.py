class Result:
    """
    The outcome of a single conversion.

    A result is either successful, carrying the converted ``units``
    (a new, null-terminated sequence owned by the caller), or failed,
    carrying the ``error`` that stopped the conversion and no units.

    ``status`` mirrors the classic status code: 0 on success, and the
    codec's number for the error kind otherwise. It is never stale,
    since it is derived from the error itself.
    """
    def __init__(self, units=None, error=None, status_codes=None):
        if (units is None) == (error is None):
            raise ValueError('A result needs exactly one of units or error')

        self.units = units
        self.error = error
        self._status_codes = status_codes or {}

    @classmethod
    def success(cls, units):
        return cls(units=units)

    @classmethod
    def failure(cls, error, status_codes=None):
        return cls(error=error, status_codes=status_codes)

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        """The `ErrorKind` of the failure, or `None` on success."""
        return None if self.error is None else self.error.kind

    @property
    def status(self):
        if self.error is None:
            return 0

        # Kinds a codec never reports still need to read as a failure
        return self._status_codes.get(self.error.kind, -1)

    def unwrap(self):
        """Returns the converted units, or raises the error."""
        if self.error is not None:
            raise self.error

        return self.units

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return 'Result(units={!r})'.format(self.units)
        return 'Result(error={!r}, status={})'.format(self.error, self.status)
