from .interface import OPT_PREFIX_KEY, ResultCode, TransportInterface
from .default import DefaultTransport
from .memcached import MemcachedTransport
