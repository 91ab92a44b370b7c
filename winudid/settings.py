"""
Everything that decides what text goes into an identifier lives
here. The order of the fields and the exact queries are part of
the identifier: change either and every machine gets a new ID.
So don't touch these without a migration plan.
"""

TIER_LEGACY = "legacy"
TIER_MODERN = "modern"
TIER_REGISTRY = "registry"
TIER_NATIVE = "native"
TIER_LAST_RESORT = "last_resort"

# Why a field ended up contributing nothing.
FIELD_OK = 0
FIELD_TOOL_UNAVAILABLE = 1
FIELD_NON_ZERO_EXIT = 2
FIELD_UNPARSEABLE = 3
FIELD_PLACEHOLDER = 4
FIELD_TIMEOUT = 5

FIELD_ERROR_NAMES = {
    FIELD_OK: "ok",
    FIELD_TOOL_UNAVAILABLE: "tool-unavailable",
    FIELD_NON_ZERO_EXIT: "non-zero-exit",
    FIELD_UNPARSEABLE: "unparseable-output",
    FIELD_PLACEHOLDER: "placeholder-value",
    FIELD_TIMEOUT: "timeout",
}

# Concatenation order. Both WMI collectors use it.
FIELD_BASEBOARD = "baseboard"
FIELD_PRODUCT_UUID = "product_uuid"
FIELD_PROCESSOR = "processor"
FIELD_DISK = "disk"
FIELD_OS = "os"
FIELD_ORDER = [
    FIELD_BASEBOARD,
    FIELD_PRODUCT_UUID,
    FIELD_PROCESSOR,
    FIELD_DISK,
    FIELD_OS,
]

"""
BIOS vendors love to fill serial fields with junk rather
than leave them blank. Matched case-insensitively as
substrings. Exact matches are in PLACEHOLDER_EXACT.
"""
PLACEHOLDER_SUBSTRINGS = [
    "to be filled",
    "not available",
    "not applicable",
    "none",
]
PLACEHOLDER_EXACT = ["0", "null"]

# wmic <class> get <property>
# The label is the column header wmic prints above the value.
WMIC_QUERIES = {
    FIELD_BASEBOARD: ["baseboard", "serialnumber"],
    FIELD_PRODUCT_UUID: ["csproduct", "uuid"],
    FIELD_PROCESSOR: ["cpu", "processorid"],
    FIELD_DISK: ["diskdrive", "serialnumber"],
    FIELD_OS: ["os", "serialnumber"],
}

# Win32 class, property, select first instance only.
CIM_QUERIES = {
    FIELD_BASEBOARD: ["Win32_BaseBoard", "SerialNumber", False],
    FIELD_PRODUCT_UUID: ["Win32_ComputerSystemProduct", "UUID", False],
    FIELD_PROCESSOR: ["Win32_Processor", "ProcessorId", True],
    FIELD_DISK: ["Win32_DiskDrive", "SerialNumber", True],
    FIELD_OS: ["Win32_OperatingSystem", "SerialNumber", False],
}

# Only non-removable disks count.
CIM_FIXED_MEDIA = "Fixed hard disk media"
CIM_WHERE = {
    FIELD_DISK: ["MediaType", CIM_FIXED_MEDIA],
}

PSHELL_ARGS = ["powershell", "-NoProfile", "-Command"]
WMIC_BIN = "wmic"
REG_BIN = "reg"

REG_HIVE = "HKEY_LOCAL_MACHINE"
REG_CRYPTO_KEY = r"SOFTWARE\Microsoft\Cryptography"
REG_CRYPTO_PATH = r"HKLM" + "\\" + REG_CRYPTO_KEY
REG_GUID_NAME = "MachineGuid"
REG_GUID_REGEX = r"MachineGuid\s+REG_SZ\s+([a-fA-F0-9\-]+)"

# Native ID sources for platforms that have one.
LINUX_ID_PATHS = [
    "/var/lib/dbus/machine-id",
    "/etc/machine-id",
]
BSD_ID_PATH = "/etc/hostid"
MAC_IOREG_ARGS = ["ioreg", "-d2", "-c", "IOPlatformExpertDevice"]
MAC_UUID_REGEX = r'"IOPlatformUUID"\s*=\s*"([^"]+)"'
BSD_KENV_ARGS = ["kenv", "-q", "smbios.system.uuid"]

"""
cmd_timeout:
    Seconds any single external tool gets before its
    field is counted as unavailable. None = wait forever.
concurrent_fields:
    Run the five field queries of a collector at once.
    Results are still joined in FIELD_ORDER.
registry_reader:
    "reg" parses 'reg query' output. "winregistry" reads
    the value through the winregistry package instead.
app_id:
    Non-empty turns every digest into HMAC-SHA256 keyed
    with this value.
"""
UDID_CONF = {
    "cmd_timeout": 10,
    "concurrent_fields": False,
    "registry_reader": "reg",
    "app_id": "",
}
