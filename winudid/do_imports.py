import os

if __name__ != '__main__':
    os.environ["PYTHONIOENCODING"] = "utf-8"

    from .errors import *
    from .settings import *
    from .utils import log, log_exception, async_test, udid_hash, dict_child

    from .cmd_tools import *
    from .normalize import *
    from .hw_field import *
    from .win_wmic import WMICParse, LegacyCollector
    from .win_cim import ModernCollector, cim_query
    from .win_reg import RegistryCollector, parse_reg_guid
    from .machine_id import NativeCollector
    from .resolver import *
