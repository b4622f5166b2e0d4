import os

from setuptools import setup

_version_ns = {}
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "simplecache", "version.py")) as _f:
    exec(_f.read(), _version_ns)
SDK_VERSION = _version_ns["SDK_VERSION"]

long_description = """
A small key-value cache library for Python backed by memcached.

It validates keys, normalizes TTLs and exposes get/set/delete/has/clear
together with their bulk variants, leaving storage, eviction and sharding to
memcached itself.
"""

setup(
    name="memcached-simplecache",
    version=SDK_VERSION,
    description="Simple key-value cache interface over memcached",
    long_description=long_description,
    license="Apache License 2.0",
    packages=["simplecache", "simplecache.transport"],
    install_requires=["python-memcached", "cachetools>=5"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=False,
)
