"""
Abstract interface for the stores a cache facade delegates to.
"""

import abc
import enum

# Option holding a prefix prepended to every key by the transport itself.
OPT_PREFIX_KEY = "prefix_key"


class ResultCode(enum.Enum):
    """Outcome of a transport operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


class TransportInterface(metaclass=abc.ABCMeta):
    """
    Interface for the client the cache facade talks to.

    Reads return `(value, ResultCode)` so that a stored falsy value is never
    confused with a miss. TTLs arrive already normalized: `None` for the
    transport default, otherwise a positive number of seconds.
    """

    @abc.abstractmethod
    def add_server(self, host, port, weight=0):
        pass

    @abc.abstractmethod
    def add_servers(self, servers):
        pass

    @abc.abstractmethod
    def reset_servers(self):
        pass

    @abc.abstractmethod
    def get_server_list(self):
        pass

    @abc.abstractmethod
    def get_option(self, name):
        pass

    @abc.abstractmethod
    def set_option(self, name, value):
        pass

    def set_options(self, options):
        """Apply every option in `options`; return whether all were accepted."""
        ok = True
        for name, value in options.items():
            ok = self.set_option(name, value) and ok
        return ok

    @abc.abstractmethod
    def get(self, key):
        pass

    @abc.abstractmethod
    def set(self, key, value, ttl=None):
        pass

    @abc.abstractmethod
    def delete(self, key):
        pass

    @abc.abstractmethod
    def flush_all(self):
        pass

    @abc.abstractmethod
    def get_multi(self, keys):
        pass

    @abc.abstractmethod
    def set_multi(self, mapping, ttl=None):
        pass

    @abc.abstractmethod
    def delete_multi(self, keys):
        pass
