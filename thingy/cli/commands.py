"""click front end for Thingy tools.

make_command() turns any Thingy subclass into a click command that forwards
every word, flags included, to Thingy.run. Example is the bundled demo tool
installed as `thingy-example`.
"""
from __future__ import annotations
import click
from config.settings import PROGNAME
from thingy.lib.app import Thingy, HelpDescriptor

_ARGV_KEY = 'thingy.argv'

class ForwardingCommand(click.Command):
	"""A click command that hands its words over untouched, `--` included."""

	def main(self, args=None, prog_name=None, **extra):
		return super().main(args, prog_name=prog_name or PROGNAME, **extra)

	def parse_args(self, ctx, args):
		ctx.meta[_ARGV_KEY] = list(args)
		return []

def make_command(tool_cls, name: str | None = None) -> click.Command:
	@click.pass_context
	def callback(ctx):
		tool = tool_cls(prog=ctx.find_root().info_name)
		tool.run(*ctx.meta[_ARGV_KEY])
	return ForwardingCommand(name, callback=callback, help=tool_cls.__doc__, add_help_option=False)


class Example(Thingy):
	"""Demo tool: cat and dog files, and keep the dog happy."""

	def initialize(self):
		self.bones = []

	def cmd_default(self):
		self.run('dog')

	def cmd__cat(self, *files):
		self._concat(files)

	def help__cat(self):
		return {'syntax': '[FILE ...]', 'description': 'concatenate one or more files'}

	def cmd__dog(self, *files):
		self._concat(files)

	def help__dog(self):
		return HelpDescriptor('[FILE ...]', 'condogenate one or more files')

	def cmd__give_the_dog_a_bone(self, *bones):
		self.bones.extend(bones or ['bone'])
		for bone in self.bones:
			click.echo(f"The dog takes the {bone}.")

	def cmd__help(self, *args):
		if not args:
			click.echo(f"{self.prog}: cats, dogs and bones.")
		super().cmd__help(*args)

	def _concat(self, files):
		for path in files or ('-',):
			try:
				with click.open_file(path, 'rb') as fh:
					for line in fh:
						click.echo(line, nl=False)
			except OSError as e:
				self.warn(f"{path}: {e.strerror or e}")


cli = make_command(Example, 'thingy-example')
