"""Base class for subcommand-driven command-line tools.

A tool subclasses Thingy and writes one method per subcommand:

	class Example(Thingy):
		def initialize(self):
			...                      # optional, runs once at construction
		def cmd_default(self):
			self.run('dog')          # optional, runs when no subcommand is given
		def cmd__cat(self, *args):
			...
		def help__cat(self):
			return {'syntax': '[FILE ...]', 'description': 'concatenate one or more files'}

	Example().run(*sys.argv[1:])

Multi-word subcommands use underscores in the method name
(cmd__give_the_dog_a_bone) and may be typed with hyphens or underscores.
Thingy supplies cmd__help; an override that wants `help <subcommand>` to keep
working must call super().cmd__help(*args).
"""
from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, NoReturn, Optional, Sequence, Tuple
import click
from config.settings import (
	HANDLER_PREFIX, HELP_PREFIX, DEFAULT_HANDLER, INIT_HOOK, HELP_COMMAND, HELP_FOOTER, PROGNAME
)
from .diagnostics import warn, fail, fail_help
from .names import normalize, to_display

log = logging.getLogger(__name__)

@dataclass
class HelpDescriptor:
	syntax: Optional[str] = None
	description: Optional[str] = None

	@classmethod
	def coerce(cls, value: Any) -> 'HelpDescriptor':
		"""Accept what a help__ method returns: a descriptor, a mapping or None."""
		if value is None:
			return cls()
		if isinstance(value, cls):
			return value
		if isinstance(value, Mapping):
			return cls(value.get('syntax'), value.get('description'))
		raise TypeError(f"help provider returned {type(value).__name__}, expected a mapping or HelpDescriptor")


class Thingy:
	def __init__(self, prog: str | None = None):
		self.prog = prog or PROGNAME
		hook = getattr(self, INIT_HOOK, None)
		if callable(hook):
			hook()

	@classmethod
	def main(cls, argv: Sequence[str] | None = None):
		"""Build the tool and dispatch argv (default: sys.argv[1:])."""
		args = list(sys.argv[1:] if argv is None else argv)
		return cls().run(*args)

	# --- dispatch ---

	def run(self, subcommand: str | None = None, *arguments):
		if subcommand is None:
			method = getattr(self, DEFAULT_HANDLER, None)
			if not callable(method):
				self.fail_help('no command specified.')
			log.debug('%s: running default handler', self.prog)
			return method()
		method, name = self.handler_for(subcommand)
		if method is None:
			self.fail_help(f"unknown command '{subcommand}'.")
		log.debug('%s: dispatching %r to %s%s with %d argument(s)', self.prog, subcommand, HANDLER_PREFIX, name, len(arguments))
		return method(*arguments)

	def handler_for(self, subcommand: str | None) -> Tuple[Optional[Callable], Optional[str]]:
		return self._lookup(HANDLER_PREFIX, subcommand)

	def help_provider_for(self, subcommand: str | None) -> Tuple[Optional[Callable], Optional[str]]:
		return self._lookup(HELP_PREFIX, subcommand)

	def _lookup(self, prefix: str, subcommand: str | None):
		if subcommand is None:
			return None, None
		name = normalize(subcommand)
		method = getattr(self, prefix + name, None)
		return (method if callable(method) else None), name

	def subcommand_list(self) -> List[str]:
		"""Implemented subcommands in display form, ordered by canonical name."""
		cls = type(self)
		names = sorted(
			attr[len(HANDLER_PREFIX):] for attr in dir(cls)
			if attr.startswith(HANDLER_PREFIX) and callable(getattr(cls, attr, None))
		)
		return [to_display(n) for n in names]

	# --- help ---

	def cmd__help(self, subcommand: str | None = None, *_rest):
		if subcommand is not None:
			self._help_one(subcommand)
		else:
			self._help_all()

	def _describe(self, subcommand: str) -> Optional[HelpDescriptor]:
		provider, _name = self.help_provider_for(subcommand)
		if provider is None:
			return None
		return HelpDescriptor.coerce(provider())

	def _help_one(self, subcommand: str):
		provider, name = self.help_provider_for(subcommand)
		if provider is None:
			self.fail_help(f"No specific help for '{name}'.")
		desc = HelpDescriptor.coerce(provider())
		usage = f"usage: {self.prog} {to_display(name)}"
		if desc.syntax is not None:
			usage += f" {desc.syntax}"
		click.echo(usage)
		if desc.description is not None:
			click.echo(desc.description)

	def _help_all(self):
		helped = False
		click.echo('usage:')
		for subcommand in self.subcommand_list():
			desc = self._describe(subcommand)
			if desc is None:
				click.echo(f"    {self.prog} {subcommand}")
				continue
			helped = True
			line = f"  * {self.prog} {subcommand}"
			if desc.syntax is not None:
				line += f" {desc.syntax}"
			click.echo(line)
		if helped:
			click.echo()
			click.echo(HELP_FOOTER.format(prog=self.prog, help=HELP_COMMAND))

	# --- diagnostics ---

	def warn(self, *parts) -> None:
		warn(self.prog, *parts)

	def fail(self, *parts) -> NoReturn:
		fail(self.prog, *parts)

	def fail_help(self, *parts) -> NoReturn:
		fail_help(self.prog, *parts)
