import re
from .errors import *
from .settings import *
from .utils import *
from .hw_field import *

"""
MachineGuid is written by Windows setup and survives hardware
changes, but it's also copied verbatim by disk imaging tools.
That's why it's only a fallback.

Output of reg query looks like:

    HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Cryptography
        MachineGuid    REG_SZ    d1a2b3c4-...
"""
def parse_reg_guid(out):
    match = re.search(REG_GUID_REGEX, out)
    if match is None:
        raise ErrorParseOutput(f"no {REG_GUID_NAME} in reg output")

    return match.group(1).strip()

def reg_query_args():
    return [REG_BIN, "query", REG_CRYPTO_PATH, "/v", REG_GUID_NAME]

@run_in_executor
def winregistry_guid():
    try:
        from winregistry import WinRegistry
    except ImportError:
        raise ErrorCmdNotFound("winregistry isn't installed")

    with WinRegistry() as reg:
        entry = reg.read_entry(REG_HIVE + "\\" + REG_CRYPTO_KEY, REG_GUID_NAME)
        return str(entry.value).strip()

# Lets the winregistry read go through the same field logic.
async def winregistry_runner(args, timeout=10):
    return await winregistry_guid()

class RegistryCollector(FieldCollector):
    tier = TIER_REGISTRY

    def field_queries(self):
        reader = self.conf["registry_reader"]
        if reader == "winregistry":
            return [self.query_closure(
                winregistry_runner,
                lambda out: out
            )]

        return [self.query_closure(self.runner, parse_reg_guid)]

    def query_closure(self, runner, parser):
        async def closure():
            return await query_field(
                REG_GUID_NAME,
                REG_CRYPTO_PATH,
                self.tier,
                reg_query_args(),
                parser,
                runner=runner,
                timeout=self.conf["cmd_timeout"]
            )

        return closure
