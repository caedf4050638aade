"""Project configuration settings.

Naming conventions the dispatcher relies on, the process-wide program name
and the fixed help texts. Environment overrides are read once at import.
"""

from pathlib import Path
import os
import sys

# Method naming conventions
HANDLER_PREFIX = "cmd__"
HELP_PREFIX = "help__"
DEFAULT_HANDLER = "cmd_default"
INIT_HOOK = "initialize"
HELP_COMMAND = "help"

# Program name shown in every usage and diagnostic line
PROGNAME = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "thingy"

# Exit status for fatal diagnostics
FAIL_STATUS = 1

# Help texts ({prog} and {help} are filled in at print time)
HELP_HINT = "Type '{prog} {help}' for help."
HELP_FOOTER = (
	"For help on each available subcommand (indicated with * above), type:\n"
	"  {prog} {help} <subcommand>"
)

# Logging
LOG_LEVEL = os.environ.get("THINGY_LOG_LEVEL", "WARNING").upper()

__all__ = [
	'HANDLER_PREFIX','HELP_PREFIX','DEFAULT_HANDLER','INIT_HOOK','HELP_COMMAND',
	'PROGNAME','FAIL_STATUS','HELP_HINT','HELP_FOOTER','LOG_LEVEL'
]
