from simplecache.transport.default import DefaultTransport
from simplecache.transport.interface import OPT_PREFIX_KEY, ResultCode


def _get_new_transport(**options):
    maxsize = 4
    return DefaultTransport(maxsize=maxsize, **options)


def test_get():
    transport = _get_new_transport()
    transport.set("foo", "bar")

    assert transport.get("foo") == ("bar", ResultCode.SUCCESS)
    assert transport.get("baz") == (None, ResultCode.NOT_FOUND)


def test_stored_none():
    transport = _get_new_transport()
    transport.set("foo", None)

    assert transport.get("foo") == (None, ResultCode.SUCCESS)


def test_maxsize():
    transport = _get_new_transport()
    for i in range(5):
        transport.set(str(i), i)

    assert transport.get("0") == (None, ResultCode.NOT_FOUND)
    assert transport.get("4") == (4, ResultCode.SUCCESS)


def test_expiry():
    now = [100]
    transport = _get_new_transport(timer=lambda: now[0])
    transport.set("foo", "bar", 5)

    now[0] = 104
    assert transport.get("foo") == ("bar", ResultCode.SUCCESS)

    now[0] = 105
    assert transport.get("foo") == (None, ResultCode.NOT_FOUND)


def test_prefix():
    transport = _get_new_transport(prefix_key="a.")
    transport.set("foo", 1)
    transport.set_option(OPT_PREFIX_KEY, "b.")

    assert transport.get("foo") == (None, ResultCode.NOT_FOUND)
    assert "a.foo" in transport.cache


def test_delete():
    transport = _get_new_transport()
    transport.set("foo", "bar")

    assert transport.delete("foo") == (True, ResultCode.SUCCESS)
    assert transport.delete("foo") == (False, ResultCode.NOT_FOUND)


def test_multi():
    transport = _get_new_transport()

    assert transport.set_multi({"a": 1, "b": 2})
    assert transport.get_multi(["a", "b", "c"]) == {"a": 1, "b": 2}
    assert transport.delete_multi(["a", "c"]) == (False, ResultCode.NOT_FOUND)
    assert transport.delete_multi(["b"]) == (True, ResultCode.SUCCESS)


def test_flush_all():
    transport = _get_new_transport()
    transport.set("foo", "bar")

    assert transport.flush_all()
    assert transport.get("foo") == (None, ResultCode.NOT_FOUND)


def test_construction_only_options():
    transport = _get_new_transport()

    assert transport.set_option("maxsize", 100) is False
    assert transport.set_option("timer", lambda: 0) is False
    assert transport.get_option("maxsize") == 4
    assert transport.cache.maxsize == 4

    assert transport.set_option("anything", 1)
    assert transport.get_option("anything") == 1
