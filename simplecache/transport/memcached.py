"""
A transport backed by `python-memcached`.
"""

import logging
import time

import memcache

from ..utils import MAX_RELATIVE_TTL, parse_servers
from .interface import OPT_PREFIX_KEY, ResultCode, TransportInterface

logger = logging.getLogger(__name__)


class MemcachedTransport(TransportInterface):
    """
    Memcached-based transport.

    Memcached implements eviction, sharding and serialization internally, so
    this only adapts `memcache.Client` to the transport interface.
    """

    def __init__(self, servers=None, **options):
        self.servers = parse_servers(servers) if servers else []
        self.options = dict(options)
        self.prefix = self.options.pop(OPT_PREFIX_KEY, None) or ""
        self.client = memcache.Client(self._server_specs(), **self.options)

    def _server_specs(self):
        # memcache.Client gives a server one bucket per unit of weight, so a
        # zero weight would make the server unreachable.
        return [
            ("{}:{}".format(host, port), max(weight, 1))
            for host, port, weight in self.servers
        ]

    def _apply_servers(self):
        self.client.set_servers(self._server_specs())
        return True

    def add_server(self, host, port, weight=0):
        self.servers.append((host, int(port), int(weight)))
        return self._apply_servers()

    def add_servers(self, servers):
        self.servers.extend(parse_servers(servers))
        return self._apply_servers()

    def reset_servers(self):
        self.servers = []
        return self._apply_servers()

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
        Set a single option, rebuilding the client if needed.

        Returns `False` and leaves the transport untouched if `memcache.Client`
        does not accept the option.
        """
        if name == OPT_PREFIX_KEY:
            self.prefix = value or ""
            return True

        options = {**self.options, name: value}
        try:
            client = memcache.Client(self._server_specs(), **options)
        except TypeError:
            logger.warning("memcache.Client does not accept option %r", name)
            return False

        self.options = options
        self.client = client
        return True

    @staticmethod
    def _expiry(ttl):
        """Convert a relative TTL to the expiry value memcached expects."""
        if ttl is None:
            return 0
        if ttl > MAX_RELATIVE_TTL:
            return int(time.time()) + ttl
        return ttl

    def get(self, key):
        # A single-key get_multi tells a stored None apart from a miss.
        try:
            found = self.client.get_multi([key], key_prefix=self.prefix)
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected key %r: %s", key, e)
            return None, ResultCode.FAILURE

        if key in found:
            return found[key], ResultCode.SUCCESS
        return None, ResultCode.NOT_FOUND

    def set(self, key, value, ttl=None):
        try:
            return bool(
                self.client.set(self.prefix + key, value, time=self._expiry(ttl))
            )
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected key %r: %s", key, e)
            return False

    def delete(self, key):
        """
        Delete `key`.

        `memcache.Client` already counts a NOT_FOUND reply as a successful
        delete, so a failure here is always a genuine error.
        """
        try:
            ok = bool(self.client.delete(self.prefix + key))
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected key %r: %s", key, e)
            return False, ResultCode.FAILURE

        return ok, ResultCode.SUCCESS if ok else ResultCode.FAILURE

    def _servers_reachable(self):
        """Return whether every configured server accepts a connection."""
        for server in self.client.servers:
            if not server.connect():
                logger.warning("memcached server %s is unreachable", server)
                return False
        return True

    def flush_all(self):
        """
        Flush every server.

        `memcache.Client.flush_all` silently skips servers it cannot reach, so
        servers are flushed one by one here and any unreachable one fails the
        whole call.
        """
        if not self.servers:
            return False

        ok = True
        for server in self.client.servers:
            if not server.connect():
                logger.warning("memcached server %s is unreachable", server)
                ok = False
                continue
            try:
                server.flush()
            except OSError as e:
                server.mark_dead(str(e))
                ok = False
        return ok

    def get_multi(self, keys):
        try:
            return self.client.get_multi(keys, key_prefix=self.prefix)
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected bulk fetch: %s", e)
            return None

    def set_multi(self, mapping, ttl=None):
        try:
            not_stored = self.client.set_multi(
                mapping, time=self._expiry(ttl), key_prefix=self.prefix
            )
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected bulk store: %s", e)
            return False

        if not_stored:
            logger.warning(
                "%d of %d keys not stored: %s",
                len(not_stored),
                len(mapping),
                ", ".join(map(str, not_stored)),
            )
            return False
        return True

    def delete_multi(self, keys):
        # memcache.Client.delete_multi drops keys of unreachable servers and
        # still reports success.
        if not self._servers_reachable():
            return False, ResultCode.FAILURE

        try:
            ok = bool(self.client.delete_multi(keys, key_prefix=self.prefix))
        except memcache.Client.MemcachedKeyError as e:
            logger.warning("memcached rejected bulk delete: %s", e)
            return False, ResultCode.FAILURE

        return ok, ResultCode.SUCCESS if ok else ResultCode.FAILURE
