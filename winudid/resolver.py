import sys
import asyncio
from .settings import *
from .utils import *
from .win_wmic import LegacyCollector
from .win_cim import ModernCollector
from .win_reg import RegistryCollector
from .machine_id import NativeCollector

STATE_UNRESOLVED = 0
STATE_RESOLVING = 1
STATE_RESOLVED = 2

"""
Used when every other tier came back empty so that callers
always get *something*. The value is different every process
so anything keyed on it won't survive a restart.
"""
class LastResortGenerator():
    tier = TIER_LAST_RESORT

    def __init__(self, conf=UDID_CONF):
        self.conf = conf

    async def collect(self):
        return udid_hash(str(timestamp(1)), self.conf["app_id"])

def platform_collectors(platform, runner=None, conf=UDID_CONF):
    if platform in ("win32", "cygwin", "msys"):
        return [
            LegacyCollector(runner=runner, conf=conf),
            ModernCollector(runner=runner, conf=conf),
            RegistryCollector(runner=runner, conf=conf),
        ]

    if platform == "darwin" or platform.startswith(("linux", "openbsd", "freebsd")):
        return [NativeCollector(runner=runner, conf=conf, platform=platform)]

    return []

"""
Runs tiers in order and keeps the first ID that comes back.
The result is kept for the life of this object and never
replaced. The lock means concurrent first callers wait on the
one resolution rather than spawning their own wmic processes.

Create one of these at start-up and share it. The module-level
unique_identifier() does that for you.
"""
class UDIDResolver():
    def __init__(self, collectors, conf=UDID_CONF):
        self.conf = conf
        self.collectors = collectors
        self.last_resort = LastResortGenerator(conf)
        self.state = STATE_UNRESOLVED
        self.udid = None
        self.tier = None

        # Made on first resolve so it belongs to the running loop.
        self.lock = None

    @classmethod
    def for_platform(cls, platform=None, runner=None, conf=UDID_CONF):
        platform = platform or sys.platform
        collectors = platform_collectors(platform, runner=runner, conf=conf)
        return cls(collectors, conf=conf)

    @property
    def resolved(self):
        return self.state == STATE_RESOLVED

    def set_udid(self, udid, tier):
        assert(self.udid is None)
        self.udid = udid
        self.tier = tier
        self.state = STATE_RESOLVED
        log(f"> UDID from {tier} tier: {udid[:8]}...")

    async def resolve(self):
        if self.udid is not None:
            return self.udid

        if self.lock is None:
            self.lock = asyncio.Lock()

        async with self.lock:
            # Someone else finished while we waited.
            if self.udid is not None:
                return self.udid

            self.state = STATE_RESOLVING
            for collector in self.collectors:
                udid = await async_wrap_errors(collector.collect())
                if udid:
                    self.set_udid(udid, collector.tier)
                    return self.udid

                log(f"> {collector.tier} tier empty, falling back")

            udid = await self.last_resort.collect()
            self.set_udid(udid, self.last_resort.tier)
            return self.udid

    """
    Some callers want a second opinion when no hardware tier
    produced an ID and the throwaway one was used. Only ever
    re-checks the registry: the memo itself isn't touched.
    """
    async def resolve_with_fallback(self):
        udid = await self.resolve()
        empty = udid == udid_hash("", self.conf["app_id"])
        if self.tier != TIER_LAST_RESORT and not empty:
            return udid

        log(f"> UDID from {self.tier} tier, trying MachineGuid")
        collector = RegistryCollector(conf=self.conf)
        for other in self.collectors:
            if isinstance(other, RegistryCollector):
                collector = other

        return (await async_wrap_errors(collector.collect())) or udid

_default_resolver = None

def get_default_resolver():
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = UDIDResolver.for_platform()

    return _default_resolver

async def unique_identifier(resolver=None):
    resolver = resolver or get_default_resolver()
    return await resolver.resolve()

async def unique_identifier_with_fallback(resolver=None):
    resolver = resolver or get_default_resolver()
    return await resolver.resolve_with_fallback()
