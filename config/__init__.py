"""Configuration settings and constants for thingy.

The package-level module exposes the constants expected by the application
code (e.g. `from config import HANDLER_PREFIX`). They are defined once in
`config.settings` and re-exported here.
"""

from .settings import (
	HANDLER_PREFIX, HELP_PREFIX, DEFAULT_HANDLER, INIT_HOOK, HELP_COMMAND,
	PROGNAME, FAIL_STATUS, HELP_HINT, HELP_FOOTER, LOG_LEVEL
)

__all__ = [
	'HANDLER_PREFIX', 'HELP_PREFIX', 'DEFAULT_HANDLER', 'INIT_HOOK', 'HELP_COMMAND',
	'PROGNAME', 'FAIL_STATUS', 'HELP_HINT', 'HELP_FOOTER', 'LOG_LEVEL'
]
