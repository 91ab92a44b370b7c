# Defines all custom exceptions.

# The external tool isn't installed or isn't on the PATH.
class ErrorCmdNotFound(Exception):
    pass

class ErrorCmdTimeout(Exception):
    pass

# Command ran but exited with a non-zero code.
class ErrorCmdFailed(Exception):
    def __init__(self, msg, returncode=None):
        super().__init__(msg)
        self.returncode = returncode

class ErrorParseOutput(Exception):
    pass

# Firmware left a vendor placeholder in the field.
class ErrorPlaceholderValue(Exception):
    pass

class ErrorUnsupportedPlatform(Exception):
    pass
