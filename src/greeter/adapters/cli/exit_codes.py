"""Exit codes for the CLI's handled error paths.

Values follow errno and sysexits.h so scripts calling ``greeter`` can tell
a bad argument from a broken configuration file.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes raised via ``SystemExit`` by greeter commands.

    * 13: EACCES, deployment target not writable
    * 22: EINVAL, bad option value or unknown config section
    * 78: EX_CONFIG, invalid ``[greeter]`` section

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
