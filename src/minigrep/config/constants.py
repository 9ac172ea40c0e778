"""
Constants and default values for minigrep.

Centralizes names and user-facing strings so the CLI and tests agree on them.
"""

from pathlib import Path

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "minigrep"
CONFIG_DIR_NAME = ".minigrep"

# ============================================================================
# Path Defaults
# ============================================================================

DEFAULT_DATA_DIR = Path.home() / CONFIG_DIR_NAME
DEFAULT_LOGS_SUBDIR = "logs"
DEFAULT_LOG_FILE_NAME = "minigrep.log"
ENV_FILE = ".env"

# ============================================================================
# Environment Variable Names
# ============================================================================

# Search is case-insensitive iff this parses as the integer 1
ENV_CASE_INSENSITIVE = "CASE_INSENSITIVE"
CASE_INSENSITIVE_ENABLED = 1

ENV_LOG_LEVEL = "MINIGREP_LOG_LEVEL"
ENV_LOG_FILE = "MINIGREP_LOG_FILE"

# ============================================================================
# Logging Defaults
# ============================================================================

DEFAULT_LOG_LEVEL = "WARNING"

# ============================================================================
# Arguments
# ============================================================================

REQUIRED_ARG_COUNT = 2

# ============================================================================
# Messages
# ============================================================================

USAGE = f"Usage: {APP_NAME} <pattern> <filename>"

HELP_TEXT = """\
Print every line of <filename> that contains <pattern>.

Environment:
  CASE_INSENSITIVE=1     ignore letter case when matching
  MINIGREP_LOG_LEVEL     diagnostic log level (default: WARNING)
  MINIGREP_LOG_FILE      also write diagnostics to this rotating log file
"""

ERROR_NOT_ENOUGH_ARGUMENTS = "not enough arguments"
ERROR_PARSING_ARGUMENTS = "Problem parsing arguments"
ERROR_APPLICATION = "Application error"
