import functools
import asyncio
import re
import time
import sys, os
import logging
import traceback
import hashlib
import hmac
import copy

if "WINUDID_DEBUG" in os.environ:
    logging.basicConfig(
        filename='program.log',
        level=logging.DEBUG,
        format='[%(asctime)s.%(msecs)03d] @ [%(filename)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    def log(m):
        if "WINUDID_DEBUG" not in os.environ:
            return

        logging.info(m)
else:
    log = lambda m: 1

to_b = lambda x: x if type(x) == bytes else x.encode("utf-8")
timestamp = lambda p=0: time.time() if p else int(time.time())
is_hex_id = lambda x: isinstance(x, str) and re.fullmatch(r"[0-9a-f]{64}", x) is not None

def to_s(x):
    if type(x) == str:
        return x

    # Windows tools sometimes write UTF-16 with a BOM
    # when their output isn't going to a console.
    if x[:2] in (b"\xff\xfe", b"\xfe\xff"):
        return x.decode("utf-16", errors="replace")

    return x.decode("utf-8", errors="replace")

# Take a dict template called Y and a child dict called X.
# Yield a new dict with Y's vals overwritten by X's.
def dict_child(x, y):
    out = copy.deepcopy(y)
    for key in x:
        out[key] = x[key]

    return out

"""
Every identifier is a SHA-256 hex digest of some text.
If an app ID is given the digest becomes a keyed HMAC
so two apps on the same machine see unrelated IDs.
"""
def udid_hash(buf, app_id=""):
    buf = to_b(buf)
    if app_id:
        return hmac.new(
            to_b(app_id),
            buf,
            hashlib.sha256,
        ).hexdigest()

    return hashlib.sha256(buf).hexdigest()

def log_exception():
    exc_type, exc_obj, exc_tb = sys.exc_info()
    fname = os.path.split(exc_tb.tb_frame.f_code.co_filename)[1]
    exc_out = traceback.format_exc()
    log("> {}, line {} = {}".format(
        fname,
        exc_tb.tb_lineno,
        exc_out
    ))

async def async_wrap_errors(coro, timeout=None):
    try:
        # Don't bound wait time.
        if timeout is None:
            return (await coro)

        # Bound wait time.
        return (await asyncio.wait_for(coro, timeout))
    except Exception:
        # Log all errors.
        log_exception()

def run_in_executor(f):
    @functools.wraps(f)
    def inner(*args, **kwargs):
        loop = asyncio.get_event_loop()
        return loop.run_in_executor(None, lambda: f(*args, **kwargs))

    return inner

def get_loop(loop=None):
    if loop is None:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
        else:
            loop = asyncio.new_event_loop()
    else:
        loop = loop()

    return loop

# Will be used in sample code to avoid boilerplate.
def async_test(f, args=[], loop=None):
    loop = get_loop(loop)
    loop.set_debug(False)
    try:
        if len(args):
            return loop.run_until_complete(f(*args))
        else:
            return loop.run_until_complete(f())
    finally:
        loop.close()
