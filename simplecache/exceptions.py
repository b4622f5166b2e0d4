"""
Exceptions raised by the cache facade.
"""


class CacheError(Exception):
    """Base class for all errors raised by this library."""

    pass


class InvalidArgumentError(CacheError, ValueError):
    """Error indicating that an argument passed to the cache is not legal."""

    pass


class InvalidKeyError(InvalidArgumentError):
    """Error indicating that a single cache key is not legal."""

    def __init__(self, key, reason):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid cache key {key!r}: {reason}")


class InvalidKeysError(InvalidArgumentError):
    """Error indicating that a bulk operation got something other than keys."""

    pass


class InvalidTTLError(InvalidArgumentError):
    """Error indicating that a TTL is of an unsupported type."""

    pass
