from .exceptions import (
    CacheError,
    InvalidArgumentError,
    InvalidKeyError,
    InvalidKeysError,
    InvalidTTLError,
)
from .interface import CacheInterface
from .memcached import Memcached
from .transport import (
    OPT_PREFIX_KEY,
    DefaultTransport,
    MemcachedTransport,
    ResultCode,
    TransportInterface,
)


def getCache(config=None, **kwargs):
    """Create and return a Memcached cache."""
    return Memcached(config, **kwargs)


def getInMemoryCache(config=None, **transport_options):
    """Create and return a cache backed by the in-process transport."""
    return Memcached(config, transport=DefaultTransport(**transport_options))
