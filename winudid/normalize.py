import re
from .errors import *
from .settings import *

# Control chars that aren't whitespace, plus a stray BOM.
CTRL_CHARS = r"[\x00-\x08\x0e-\x1f\x7f-\x9f\ufeff]"

def collapse_output(raw):
    out = raw.strip()
    out = out.replace("\r", "")
    out = re.sub(CTRL_CHARS, "", out)

    # Multiple lines and spaces become single spaces.
    out = out.replace("\n", " ")
    out = re.sub(r"\s+", " ", out)
    return out.strip()

def is_placeholder(value):
    lowered = value.lower()
    for junk in PLACEHOLDER_SUBSTRINGS:
        if junk in lowered:
            return True

    return value in PLACEHOLDER_EXACT

"""
Used by parsers that need to know *why* a value was
dropped. An empty result is a legit empty field but
placeholder text raises so the field can record it.
"""
def normalize_field(raw):
    value = collapse_output(raw)
    if len(value) and is_placeholder(value):
        raise ErrorPlaceholderValue(value)

    return value

# Cleaned text or "" if it can't be used.
def clean_output(raw):
    try:
        return normalize_field(raw)
    except ErrorPlaceholderValue:
        return ""
