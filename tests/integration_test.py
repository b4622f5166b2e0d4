import socket
import uuid

import pytest

from simplecache.memcached import Memcached

HOST = "127.0.0.1"
PORT = 11211


def _memcached_running():
    try:
        with socket.create_connection((HOST, PORT), timeout=3):
            return True
    except OSError:
        return False


pytestmark = pytest.mark.skipif(
    not _memcached_running(), reason="no memcached server is running"
)


def _get_new_cache():
    # unique prefix so runs do not see each other's keys
    return Memcached(
        {
            "prefix": "test.{}.".format(uuid.uuid4().hex),
            "servers": [(HOST, PORT, 1)],
        }
    )


def test_round_trip():
    cache = _get_new_cache()

    assert cache.set("a", "1") is True
    assert cache.get("a") == "1"
    assert cache.has("a")
    assert cache.delete("a") is True
    assert cache.get("a", "miss") == "miss"
    assert cache.delete("a") is True


def test_falsy_values():
    cache = _get_new_cache()

    for value in (0, False, "", None):
        assert cache.set("falsy", value)
        assert cache.get("falsy", "default") == value
        assert cache.has("falsy")


def test_expired_ttl():
    cache = _get_new_cache()
    cache.set("a", "1")

    assert cache.set("a", "2", 0) is True
    assert not cache.has("a")


def test_multiple():
    cache = _get_new_cache()

    assert cache.setMultiple({"k1": 1, "k2": 2}, ttl=60)
    assert cache.getMultiple(["k1", "k2", "k3"], "D") == {
        "k1": 1,
        "k2": 2,
        "k3": "D",
    }
    assert cache.deleteMultiple(["k1", "k2", "k3"])
    assert cache.getMultiple(["k1", "k2"]) == {"k1": None, "k2": None}
