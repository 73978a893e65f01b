"""
Constants shared across the cmdinfra package.
"""

import re

# Whole-token grammar for option flags: "-x" or "--name"
OPTION_TOKEN_PATTERN = re.compile(r"(?:-(?P<short>\w)|--(?P<long>\w+))", re.ASCII)

# Command name format and limits
COMMAND_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_-]*")
MAX_COMMAND_NAME_LENGTH = 64

# Dispatch defaults
DEFAULT_COMMAND = "help"
DEFAULT_PROG = "cli"

# Environment variable prefix for configuration overrides
ENV_PREFIX = "CMDINFRA_"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024
