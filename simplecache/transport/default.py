"""
A default transport that uses `cachetools` for an in-process LRU store with
per-entry expiry.
"""

import logging
import math
import time

import cachetools

from ..utils import CACHE_MAXSIZE, parse_servers
from .interface import OPT_PREFIX_KEY, ResultCode, TransportInterface

logger = logging.getLogger(__name__)

# Options the TLRUCache is built from.
CONSTRUCTION_OPTIONS = ("maxsize", "timer")


def _time_to_use(key, entry, now):
    _, ttl = entry
    return math.inf if ttl is None else now + ttl


class DefaultTransport(TransportInterface):
    """
    Default, in-memory transport.

    Entries live in this process only. Servers are recorded so the facade's
    server management behaves the same, but they are never contacted.

    Recognized options are `maxsize` and `timer`, both read at construction,
    and `prefix_key`.
    """

    def __init__(self, servers=None, **options):
        self.servers = parse_servers(servers) if servers else []
        self.options = dict(options)
        self.prefix = self.options.pop(OPT_PREFIX_KEY, None) or ""
        self.cache = cachetools.TLRUCache(
            maxsize=self.options.get("maxsize", CACHE_MAXSIZE),
            ttu=_time_to_use,
            timer=self.options.get("timer", time.monotonic),
        )

    def add_server(self, host, port, weight=0):
        self.servers.append((host, int(port), int(weight)))
        return True

    def add_servers(self, servers):
        self.servers.extend(parse_servers(servers))
        return True

    def reset_servers(self):
        self.servers = []
        return True

    def get_server_list(self):
        return [
            {"host": host, "port": port, "weight": weight}
            for host, port, weight in self.servers
        ]

    def get_option(self, name):
        if name == OPT_PREFIX_KEY:
            return self.prefix
        return self.options.get(name)

    def set_option(self, name, value):
        """
        Set a single option.

        Returns `False` for options the store only reads at construction.
        """
        if name in CONSTRUCTION_OPTIONS:
            logger.warning("option %r can only be set at construction", name)
            return False

        if name == OPT_PREFIX_KEY:
            self.prefix = value or ""
        else:
            self.options[name] = value
        return True

    def get(self, key):
        try:
            value, _ = self.cache[self.prefix + key]
        except KeyError:
            return None, ResultCode.NOT_FOUND
        return value, ResultCode.SUCCESS

    def set(self, key, value, ttl=None):
        self.cache[self.prefix + key] = (value, ttl)
        return True

    def delete(self, key):
        try:
            del self.cache[self.prefix + key]
        except KeyError:
            return False, ResultCode.NOT_FOUND
        return True, ResultCode.SUCCESS

    def flush_all(self):
        self.cache.clear()
        return True

    def get_multi(self, keys):
        found = {}
        for key in keys:
            value, code = self.get(key)
            if code == ResultCode.SUCCESS:
                found[key] = value
        return found

    def set_multi(self, mapping, ttl=None):
        for key, value in mapping.items():
            self.set(key, value, ttl)
        return True

    def delete_multi(self, keys):
        deleted_all = True
        for key in keys:
            ok, _ = self.delete(key)
            deleted_all = deleted_all and ok

        if deleted_all:
            return True, ResultCode.SUCCESS
        return False, ResultCode.NOT_FOUND
