import re
from .settings import *
from .utils import *
from .hw_field import *

"""
wmic is deprecated and missing from newer Windows 11 builds
but it's still on most machines and it's what the oldest IDs
were built from. Its output is a column header followed by
the value(s):

    SerialNumber
    PF2ABCDE

The header is stripped along with every bit of whitespace.
Placeholder values are kept as is: filtering them here would
change the ID of machines that have already registered one.
"""
class WMICParse():
    @staticmethod
    def strip_label(label, msg):
        p = re.escape(label) + r"|\s"
        return re.sub(p, "", msg, flags=re.IGNORECASE)

def wmic_args(wmi_class, prop):
    return [WMIC_BIN, wmi_class, "get", prop]

class LegacyCollector(FieldCollector):
    tier = TIER_LEGACY

    def field_queries(self):
        queries = []
        for name in FIELD_ORDER:
            wmi_class, prop = WMIC_QUERIES[name]
            queries.append(
                self.query_closure(name, wmi_class, prop)
            )

        return queries

    def query_closure(self, name, wmi_class, prop):
        def parser(out):
            return WMICParse.strip_label(prop, out)

        async def closure():
            return await query_field(
                name,
                wmi_class,
                self.tier,
                wmic_args(wmi_class, prop),
                parser,
                runner=self.runner,
                timeout=self.conf["cmd_timeout"]
            )

        return closure

async def workspace():
    collector = LegacyCollector()
    print(await collector.collect())
    print(collector.fields)

if __name__ == "__main__":
    async_test(workspace)
