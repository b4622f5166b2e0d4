"""
Utilities used by the cache facade and its transports.
"""

from collections.abc import Iterable, Mapping
import datetime
import math
import numbers
import re

from .exceptions import InvalidKeysError, InvalidTTLError

# The longest key memcached servers accept.
MAX_KEY_LENGTH = 250

# Characters that may not appear in a cache key.
RESERVED_CHARACTERS = "{}()/\\@:"

# memcached treats expiry values above 30 days as unix timestamps.
MAX_RELATIVE_TTL = 60 * 60 * 24 * 30

# The default max size of the in-process store in terms of number of items.
CACHE_MAXSIZE = 4096

# The port memcached listens on unless told otherwise.
DEFAULT_PORT = 11211


def _whole_seconds(seconds):
    # Round positive fractions up so a short TTL never becomes "expired".
    if seconds > 0:
        return math.ceil(seconds)
    return int(seconds)


def relative_ttl(ttl):
    """
    Normalize `ttl` to a number of seconds relative to now, or `None`.

    Accepts `None`, a number of seconds, a `datetime.timedelta` or an absolute
    `datetime.datetime`. The result may be zero or negative, which means the
    entry is already expired.
    """
    if ttl is None:
        return None

    # bool is an int subclass, but `ttl=True` is always a mistake.
    if isinstance(ttl, bool):
        raise InvalidTTLError("TTL must not be a boolean")

    if isinstance(ttl, numbers.Real):
        return _whole_seconds(ttl)

    if isinstance(ttl, datetime.timedelta):
        return _whole_seconds(ttl.total_seconds())

    if isinstance(ttl, datetime.datetime):
        now = datetime.datetime.now(ttl.tzinfo)
        return _whole_seconds((ttl - now).total_seconds())

    raise InvalidTTLError(
        "TTL must be None, a number of seconds, a timedelta or a datetime, "
        "not {}".format(type(ttl).__name__)
    )


def is_expired(ttl):
    """Return whether a normalized TTL means "delete immediately"."""
    return ttl is not None and ttl <= 0


def keys_to_list(keys):
    """
    Turn an iterable of keys into a list, preserving order.

    Raises `InvalidKeysError` if `keys` is not iterable. A bare string is
    iterable but is never a collection of keys, so it is rejected too.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidKeysError(
            "keys must be an iterable of strings, not {}".format(
                type(keys).__name__
            )
        )
    return list(keys)


def items_to_dict(values):
    """
    Turn a mapping or an iterable of `(key, value)` pairs into a dict.

    Raises `InvalidKeysError` if `values` has neither shape.
    """
    if isinstance(values, Mapping):
        return dict(values)

    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidKeysError(
            "values must be a mapping or an iterable of pairs, not {}".format(
                type(values).__name__
            )
        )

    result = {}
    for item in values:
        try:
            key, value = item
            result[key] = value
        except (TypeError, ValueError):
            raise InvalidKeysError(
                "expected a (key, value) pair, got {!r}".format(item)
            ) from None
    return result


def dedupe(keys):
    """Return `keys` without duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(keys))


def parse_servers(servers):
    """
    Turn a server list into `(host, port, weight)` tuples.

    `servers` is either a string of `host[:port]` entries separated by `;` or
    `,`, or a sequence whose items are such strings or `(host, port)` /
    `(host, port, weight)` tuples.
    """
    if isinstance(servers, str):
        servers = [s for s in re.split("[;,]", servers) if s.strip()]

    parsed = []
    for server in servers:
        if isinstance(server, str):
            host, _, port = server.strip().rpartition(":")
            if not host:
                host, port = port, DEFAULT_PORT
            parsed.append((host, int(port), 0))
        else:
            host, port, *rest = server
            weight = rest[0] if rest else 0
            parsed.append((host, int(port), int(weight)))
    return parsed
