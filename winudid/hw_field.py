import asyncio
from .errors import *
from .settings import *
from .utils import *
from .cmd_tools import cmd

"""
One attribute as returned by one query. A field either holds
a value (which may legitimately be "") or records why it has
none. Either way it's thrown away once the collector has
folded it into the buffer that gets hashed.
"""
class HardwareField():
    def __init__(self, name, source, tier, raw=None, value=None, error=FIELD_OK):
        self.name = name
        self.source = source
        self.tier = tier
        self.raw = raw
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error == FIELD_OK and self.value is not None

    @property
    def found(self):
        return self.ok and len(self.value) > 0

    # What this field adds to the concatenated buffer.
    def text(self):
        return self.value if self.ok else ""

    def fail(self, error):
        self.value = None
        self.error = error
        return self

    def __repr__(self):
        if self.ok:
            status = "Found" if self.found else "EMPTY"
        else:
            status = FIELD_ERROR_NAMES[self.error]

        return f"HardwareField({self.tier}.{self.name} = {status})"

# Ordered, no separators. Changing this changes every ID.
def fold_fields(fields):
    return "".join([field.text() for field in fields])

def fields_summary(fields):
    parts = []
    for field in fields:
        status = "Found" if field.found else "EMPTY"
        parts.append(f"{field.name}: '{status}'")

    return ", ".join(parts)

"""
Run one external query and turn whatever happens into a field.
The parser gets the raw stdout and returns the value. Every
failure kind is recorded on the field instead of raised.
"""
async def query_field(name, source, tier, args, parser, runner=cmd, timeout=10):
    field = HardwareField(name, source, tier)
    try:
        field.raw = await runner(args, timeout=timeout)
        field.value = parser(field.raw)
    except ErrorCmdNotFound:
        field.fail(FIELD_TOOL_UNAVAILABLE)
    except ErrorCmdTimeout:
        field.fail(FIELD_TIMEOUT)
    except ErrorCmdFailed:
        field.fail(FIELD_NON_ZERO_EXIT)
    except ErrorPlaceholderValue:
        field.fail(FIELD_PLACEHOLDER)
    except ErrorParseOutput:
        field.fail(FIELD_UNPARSEABLE)
    except (FileNotFoundError, PermissionError):
        # Missing registry key or access denied.
        field.fail(FIELD_TOOL_UNAVAILABLE)
    except OSError:
        field.fail(FIELD_NON_ZERO_EXIT)
    except Exception:
        log_exception()
        field.fail(FIELD_UNPARSEABLE)

    if not field.ok:
        log(f"> {tier} {name} unavailable: {FIELD_ERROR_NAMES[field.error]}")

    return field

class FieldCollector():
    tier = None

    def __init__(self, runner=None, conf=UDID_CONF):
        self.runner = runner or cmd
        self.conf = conf
        self.fields = []

    # List of zero-arg coroutine functions, one per field.
    def field_queries(self):
        raise NotImplementedError

    async def collect_fields(self):
        queries = self.field_queries()

        # Fields don't depend on each other so order only
        # matters when they're folded together.
        if self.conf["concurrent_fields"]:
            tasks = [query() for query in queries]
            return list(await asyncio.gather(*tasks))

        fields = []
        for query in queries:
            fields.append(await query())

        return fields

    # Digest of the folded fields or None if nothing was found.
    async def collect(self):
        self.fields = await self.collect_fields()
        buf = fold_fields(self.fields)
        log(f"> {self.tier} fields = {fields_summary(self.fields)}, len = {len(buf)}")
        if not len(buf):
            return None

        return udid_hash(buf, self.conf["app_id"])
