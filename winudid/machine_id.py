"""
Platforms other than Windows already have an ID that the OS
promises is unique so there's no field gathering to do. Read
it, sanitize it, hash it.
"""

import re
import sys
from .errors import *
from .settings import *
from .utils import *
from .hw_field import *

def sanitize_id(s):
    return re.sub(r'[\x00-\x1f\x7f-\x9f\s]', '', s).strip()

@run_in_executor
def read_id_file(path):
    try:
        with open(path) as f:
            return f.read().strip()
    except FileNotFoundError:
        raise ErrorCmdNotFound(path)
    except OSError as e:
        raise ErrorCmdFailed(f"{path}: {e}")

def parse_native_id(out):
    value = sanitize_id(out)
    if not len(value):
        raise ErrorParseOutput("native id is blank")

    return value

def parse_ioreg(out):
    match = re.search(MAC_UUID_REGEX, out)
    if match is None:
        raise ErrorParseOutput("no IOPlatformUUID in ioreg output")

    return sanitize_id(match.group(1))

async def file_runner(args, timeout=10):
    return await read_id_file(args[0])

class NativeCollector(FieldCollector):
    tier = TIER_NATIVE

    def __init__(self, runner=None, conf=UDID_CONF, platform=None):
        super().__init__(runner=runner, conf=conf)
        self.platform = platform or sys.platform

    # Sources in order of preference. Each is [source, args, runner, parser].
    def sources(self):
        if self.platform == "darwin":
            return [["ioreg", MAC_IOREG_ARGS, self.runner, parse_ioreg]]

        if self.platform.startswith("linux"):
            return [
                [path, [path], file_runner, parse_native_id]
                for path in LINUX_ID_PATHS
            ]

        if self.platform.startswith(("openbsd", "freebsd")):
            return [
                [BSD_ID_PATH, [BSD_ID_PATH], file_runner, parse_native_id],
                ["kenv", BSD_KENV_ARGS, self.runner, parse_native_id],
            ]

        raise ErrorUnsupportedPlatform(self.platform)

    def field_queries(self):
        return [self.first_of_closure()]

    # Only one native ID is used: the first source that has one.
    def first_of_closure(self):
        async def closure():
            field = None
            for source, args, runner, parser in self.sources():
                field = await query_field(
                    "machine_id",
                    source,
                    self.tier,
                    args,
                    parser,
                    runner=runner,
                    timeout=self.conf["cmd_timeout"]
                )

                if field.found:
                    return field

            return field

        return closure