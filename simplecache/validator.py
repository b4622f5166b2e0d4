"""
Validation of cache keys.
"""

from .exceptions import InvalidKeyError
from .utils import MAX_KEY_LENGTH, RESERVED_CHARACTERS


def validate_key(key):
    """
    Raise `InvalidKeyError` unless `key` is a legal cache key.

    A legal key is a non-empty string of at most `MAX_KEY_LENGTH` characters
    which contains none of `RESERVED_CHARACTERS`.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(key, "must be a string")

    if not key:
        raise InvalidKeyError(key, "must not be empty")

    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyError(
            key, "longer than {} characters".format(MAX_KEY_LENGTH)
        )

    for char in key:
        if char in RESERVED_CHARACTERS:
            raise InvalidKeyError(
                key, "contains reserved character {!r}".format(char)
            )

    return key


def validate_keys(keys):
    """Validate every key in `keys`, failing on the first illegal one."""
    for key in keys:
        validate_key(key)
    return keys
