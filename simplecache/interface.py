"""
Abstract interface every cache implementation provides.
"""

import abc

_MISSING = object()


class CacheInterface(metaclass=abc.ABCMeta):
    """
    Interface for key-value caches with relative-TTL semantics.

    Keys are strings; values are anything the backing store can serialize.
    A TTL is `None` (store default), seconds, a `datetime.timedelta` or an
    absolute `datetime.datetime`; a TTL that is already in the past removes
    the entry instead of storing it.
    """

    @abc.abstractmethod
    def get(self, key, default=None):
        pass

    @abc.abstractmethod
    def set(self, key, value, ttl=None):
        pass

    @abc.abstractmethod
    def delete(self, key):
        pass

    @abc.abstractmethod
    def clear(self):
        pass

    @abc.abstractmethod
    def getMultiple(self, keys, default=None):
        pass

    @abc.abstractmethod
    def setMultiple(self, values, ttl=None):
        pass

    @abc.abstractmethod
    def deleteMultiple(self, keys):
        pass

    @abc.abstractmethod
    def has(self, key):
        pass

    def __contains__(self, key):
        return self.has(key)

    def __getitem__(self, key):
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.delete(key)
