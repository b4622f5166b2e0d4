"""
A key-value cache facade over a memcached transport.
"""

import logging

from .interface import CacheInterface
from .transport.interface import OPT_PREFIX_KEY, ResultCode
from .transport.memcached import MemcachedTransport
from .utils import dedupe, is_expired, items_to_dict, keys_to_list, relative_ttl
from .validator import validate_key, validate_keys

logger = logging.getLogger(__name__)


class Memcached(CacheInterface):
    """
    Memcached-backed cache.

    Keys are validated before anything reaches the transport. Transport
    failures are never raised; they come back as `False` or, for reads, as a
    miss. Eviction, sharding and serialization are left to memcached.
    """

    def __init__(self, config=None, transport=None):
        """
        Initialize the cache from `config`, a mapping with the optional keys
        `prefix`, `servers` and `options`.

        `prefix` namespaces every key unless `options` sets `OPT_PREFIX_KEY`
        itself. `servers` is a sequence of `(host, port, weight)` tuples or a
        `;`-separated string of `host:port` entries. `options` are handed to
        the transport verbatim.

        Nothing is contacted here, so an unreachable server only shows up as
        failed operations later on.
        """
        config = config or {}
        self.mc = transport if transport is not None else MemcachedTransport()

        prefix = config.get("prefix")
        servers = config.get("servers")
        options = config.get("options")

        if servers:
            self.addServers(servers)
        if options:
            self.setOptions(options)
        if prefix is not None and OPT_PREFIX_KEY not in (options or {}):
            self.setOption(OPT_PREFIX_KEY, prefix)

    def handle(self):
        """Return the underlying transport."""
        return self.mc

    def addServer(self, host, port, weight=0):
        return self.mc.add_server(host, port, weight)

    def addServers(self, servers):
        return self.mc.add_servers(servers)

    def clearServers(self):
        return self.mc.reset_servers()

    def getServerList(self):
        return self.mc.get_server_list()

    def getOption(self, name):
        return self.mc.get_option(name)

    def setOption(self, name, value):
        return self.mc.set_option(name, value)

    def setOptions(self, options):
        return self.mc.set_options(options)

    def _ok_if_not_found(self, ok, code):
        if ok or code == ResultCode.NOT_FOUND:
            return True
        logger.warning("memcached delete failed: %s", code.value)
        return False

    def get(self, key, default=None):
        """
        Fetch the value stored under `key`, or `default` on a miss.

        A stored falsy value is returned as is; only the transport's result
        code decides whether the key was found.
        """
        validate_key(key)

        value, code = self.mc.get(key)
        if code != ResultCode.SUCCESS:
            logger.debug("cache miss for %r (%s)", key, code.value)
            return default
        return value

    def set(self, key, value, ttl=None):
        """
        Store `value` under `key`.

        A TTL that is zero or already in the past deletes the key instead and
        succeeds whether or not the key existed.
        """
        validate_key(key)

        ttl = relative_ttl(ttl)
        if is_expired(ttl):
            logger.debug("TTL %d for %r already expired, deleting", ttl, key)
            return self._ok_if_not_found(*self.mc.delete(key))

        return self.mc.set(key, value, ttl)

    def delete(self, key):
        """Delete `key`. Deleting a key that does not exist succeeds."""
        validate_key(key)
        return self._ok_if_not_found(*self.mc.delete(key))

    def clear(self):
        """
        Flush every server.

        This wipes the whole shared store, including keys outside this
        cache's prefix.
        """
        return self.mc.flush_all()

    def getMultiple(self, keys, default=None):
        """
        Fetch several keys at once.

        The result has exactly one entry per distinct requested key; keys that
        were not found map to `default`. If the bulk fetch fails altogether,
        every key maps to `default`.
        """
        keys = validate_keys(keys_to_list(keys))
        if not keys:
            return {}

        found = self.mc.get_multi(dedupe(keys))
        if found is None:
            logger.warning("bulk fetch of %d keys failed", len(keys))
            found = {}

        return {key: found[key] if key in found else default for key in keys}

    def setMultiple(self, values, ttl=None):
        """
        Store every `(key, value)` of `values` under one TTL.

        `values` may be a mapping or an iterable of pairs. A TTL that is zero
        or in the past deletes the keys instead. The result is a single
        boolean: it does not say which keys failed.
        """
        values = items_to_dict(values)
        validate_keys(values)

        ttl = relative_ttl(ttl)
        if is_expired(ttl):
            return self.deleteMultiple(list(values))

        if not values:
            return True
        return self.mc.set_multi(values, ttl)

    def deleteMultiple(self, keys):
        """Delete several keys at once. Missing keys are not an error."""
        keys = validate_keys(keys_to_list(keys))
        if not keys:
            return True
        return self._ok_if_not_found(*self.mc.delete_multi(dedupe(keys)))

    def has(self, key):
        """
        Determine whether `key` is present.

        Another client may change the key right after this returns, so use
        it for cache warming and diagnostics, never to guard a get or set.
        """
        validate_key(key)
        _, code = self.mc.get(key)
        return code == ResultCode.SUCCESS
