# topmark:header:start
#
#   project      : ConfigDocs
#   file         : exit_codes.py
#   file_relpath : src/configdocs/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Standardized exit codes used by the ConfigDocs CLI.

Codes other than ``SUCCESS``/``FAILURE`` follow BSD ``sysexits`` where a
matching code exists.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ConfigDocs CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid arguments or options (Click's own code).
        SCHEMA_ERROR (int): A record failed validation (cycle, duplicate field,
            unknown nested record) or could not be imported (``EX_DATAERR``).
        UNSUPPORTED_TYPE (int): A field cannot be rendered in the chosen format
            (``EX_UNAVAILABLE``).
        CONFIG_ERROR (int): Malformed ``[tool.configdocs]`` settings
            (``EX_CONFIG``).
        IO_ERROR (int): The documentation file could not be written
            (``EX_IOERR``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    SCHEMA_ERROR = 65
    UNSUPPORTED_TYPE = 69
    IO_ERROR = 74
    CONFIG_ERROR = 78
