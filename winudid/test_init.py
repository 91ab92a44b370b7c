import asyncio
import unittest
import hashlib
import platform
import sys
from unittest import main
from unittest.mock import patch, AsyncMock

from .errors import *
from .settings import *
from .utils import *
from .cmd_tools import *
from .normalize import *
from .hw_field import *
from .win_wmic import *
from .win_cim import *
from .win_reg import *
from .machine_id import *
from .resolver import *

# How wmic capitalizes its column headers.
WMIC_LABELS = {
    "serialnumber": "SerialNumber",
    "uuid": "UUID",
    "processorid": "ProcessorId",
}

sha256_hex = lambda x: hashlib.sha256(to_b(x)).hexdigest()

def legacy_key(name):
    wmi_class, prop = WMIC_QUERIES[name]
    return tuple(wmic_args(wmi_class, prop))

def modern_key(name):
    wmi_class, prop, first = CIM_QUERIES[name]
    query = cim_query(wmi_class, prop, first=first, where=CIM_WHERE.get(name))
    return tuple(pshell_args(query))

def reg_key():
    return tuple(reg_query_args())

def wmic_out(name, value):
    _, prop = WMIC_QUERIES[name]
    label = WMIC_LABELS[prop]
    return f"{label}  \r\r\n{value}  \r\r\n\r\r\n"

def reg_out(guid):
    out = "\r\nHKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Cryptography\r\n"
    out += f"    MachineGuid    REG_SZ    {guid}\r\n\r\n"
    return out

"""
Stands in for cmd() so the Windows tiers can be driven from
any OS. Results are keyed by the exact argument vector: a
string is returned as stdout, an exception is raised. Anything
not set up behaves like a missing tool.
"""
class FakeCmdRunner():
    def __init__(self, results=None, delays=None):
        self.results = results or {}
        self.delays = delays or {}
        self.calls = []

    def set_result(self, key, result):
        self.results[tuple(key)] = result

    async def __call__(self, args, timeout=10):
        key = tuple(args)
        self.calls.append(key)
        if key in self.delays:
            await asyncio.sleep(self.delays[key])

        result = self.results.get(key, ErrorCmdNotFound(args[0]))
        if isinstance(result, Exception):
            raise result

        return result

"""
Build a runner for the Windows tiers. Each arg maps field name
to a value or an exception. Legacy values are wrapped in wmic's
header layout and the registry value in reg query's.
"""
def windows_runner(legacy=None, modern=None, guid=None):
    runner = FakeCmdRunner()
    for name, value in (legacy or {}).items():
        if not isinstance(value, Exception):
            value = wmic_out(name, value)

        runner.set_result(legacy_key(name), value)

    for name, value in (modern or {}).items():
        runner.set_result(modern_key(name), value)

    if guid is not None:
        if not isinstance(guid, Exception):
            guid = reg_out(guid)

        runner.set_result(reg_key(), guid)

    return runner

def windows_resolver(runner, conf=UDID_CONF):
    return UDIDResolver.for_platform("win32", runner=runner, conf=conf)

LEGACY_FIELDS = {
    FIELD_BASEBOARD: "PF2ABCDE",
    FIELD_PRODUCT_UUID: "4C4C4544-0042-3510-8051-B4C04F4E3732",
    FIELD_PROCESSOR: "BFEBFBFF000906EA",
    FIELD_DISK: "S4EWNX0R123456",
    FIELD_OS: "00330-80000-00000-AA123",
}

MODERN_FIELDS = {
    FIELD_BASEBOARD: "PF2ABCDE\r\n",
    FIELD_PRODUCT_UUID: "4C4C4544-0042-3510-8051-B4C04F4E3732\r\n",
    FIELD_PROCESSOR: "BFEBFBFF000906EA\r\n",
    FIELD_DISK: "S4EWNX0R123456\r\n",
    FIELD_OS: "00330-80000-00000-AA123\r\n",
}

MACHINE_GUID = "d1a2b3c4-5e6f-4a1b-9c8d-7e6f5a4b3c2d"
