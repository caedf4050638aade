"""Warning and fatal-error helpers.

Every message is prefixed with the program name and written to stderr.
Fatal helpers raise SystemExit, so they never return.
"""
from __future__ import annotations
import logging
from typing import NoReturn
import click
from config.settings import FAIL_STATUS, HELP_COMMAND, HELP_HINT

log = logging.getLogger(__name__)

def warn(prog: str, *parts) -> None:
	click.echo(f"{prog}: " + ''.join(str(p) for p in parts), err=True)

def fail(prog: str, *parts) -> NoReturn:
	click.echo(f"{prog}: " + ''.join(str(p) for p in parts), err=True)
	log.debug('exiting with status %d', FAIL_STATUS)
	raise SystemExit(FAIL_STATUS)

def fail_help(prog: str, *parts) -> NoReturn:
	"""Report a usage problem and point the user at the help command."""
	warn(prog, *parts)
	fail(prog, HELP_HINT.format(prog=prog, help=HELP_COMMAND))
