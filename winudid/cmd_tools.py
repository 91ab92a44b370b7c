import asyncio
import subprocess
from .errors import *
from .utils import *
from .settings import PSHELL_ARGS

class CmdResult():
    def __init__(self, args, returncode, stdout, stderr):
        self.args = args
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __repr__(self):
        return "CmdResult({}, rc={})".format(
            " ".join(self.args),
            self.returncode
        )

"""
Runs a program directly without a shell. Arguments are passed
as a list so there's no quoting to get wrong with powershell
queries that contain pipes and braces.

Raises ErrorCmdNotFound if the tool doesn't exist and
ErrorCmdTimeout if it doesn't finish in time. A hung
tool is killed so it doesn't linger after we give up.
"""
async def cmd_result(args, timeout=10):
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ErrorCmdNotFound(f"{args[0]}: {e}")
    except NotImplementedError:
        # Loops without subprocess support (old selector loops on NT.)
        return await blocking_cmd_result(args, timeout)

    try:
        if timeout:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(),
                timeout
            )
        else:
            stdout, stderr = await proc.communicate()
    except asyncio.TimeoutError:
        log(f"command {args} timed out")
        try:
            proc.kill()
        except ProcessLookupError:
            pass
        await proc.wait()
        raise ErrorCmdTimeout(f"{args[0]} timed out after {timeout}s")

    # Log any visible errors.
    if stderr is not None and len(stderr):
        log(f"cmd {args} stderr = {to_s(stderr)}")

    return CmdResult(
        args,
        proc.returncode,
        to_s(stdout or b""),
        to_s(stderr or b"")
    )

@run_in_executor
def blocking_cmd_result(args, timeout):
    try:
        proc = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ErrorCmdNotFound(f"{args[0]}: {e}")
    except subprocess.TimeoutExpired:
        log(f"command {args} timed out")
        raise ErrorCmdTimeout(f"{args[0]} timed out after {timeout}s")

    return CmdResult(
        args,
        proc.returncode,
        to_s(proc.stdout or b""),
        to_s(proc.stderr or b"")
    )

# Only the output matters to callers -- exit codes become errors.
async def cmd(args, timeout=10):
    result = await cmd_result(args, timeout=timeout)
    if result.returncode != 0:
        raise ErrorCmdFailed(
            f"{args[0]} exited with {result.returncode}",
            result.returncode
        )

    return result.stdout

# Build the argument list for one powershell query.
def pshell_args(query):
    return PSHELL_ARGS + [query]
