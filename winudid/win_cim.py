from .settings import *
from .utils import *
from .cmd_tools import pshell_args
from .normalize import normalize_field
from .hw_field import *

"""
Get-CimInstance is the replacement for wmic. Output is one
value per instance so multi-instance classes are flattened
to a single line. The processor class only takes the first
instance: every core on a multi-socket board reports the same
ProcessorId and the count would leak into the hash.
"""
def cim_query(wmi_class, prop, first=False, where=None):
    q = f"Get-CimInstance {wmi_class}"
    if where is not None:
        where_prop, where_val = where
        q += " | Where-Object {$_.%s -eq '%s'}" % (where_prop, where_val)

    q += " | Select-Object"
    if first:
        q += " -First 1"

    q += f" -ExpandProperty {prop} -ErrorAction SilentlyContinue"
    return q

class ModernCollector(FieldCollector):
    tier = TIER_MODERN

    def field_queries(self):
        queries = []
        for name in FIELD_ORDER:
            wmi_class, prop, first = CIM_QUERIES[name]
            query = cim_query(
                wmi_class,
                prop,
                first=first,
                where=CIM_WHERE.get(name)
            )

            queries.append(
                self.query_closure(name, wmi_class, query)
            )

        return queries

    def query_closure(self, name, wmi_class, query):
        async def closure():
            return await query_field(
                name,
                wmi_class,
                self.tier,
                pshell_args(query),
                normalize_field,
                runner=self.runner,
                timeout=self.conf["cmd_timeout"]
            )

        return closure

async def workspace():
    collector = ModernCollector()
    print(await collector.collect())
    print(collector.fields)

if __name__ == "__main__":
    async_test(workspace)
