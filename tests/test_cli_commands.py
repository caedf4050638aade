from click.testing import CliRunner
from config import settings
from thingy.cli.commands import cli, make_command, Example
from thingy.lib.app import Thingy

def invoke(args, **kw):
	return CliRunner().invoke(cli, args, prog_name='tool', **kw)

def test_cli_help_listing():
	r = invoke(['help'])
	assert r.exit_code == 0
	assert r.output.startswith('tool: cats, dogs and bones.\nusage:\n')
	assert '  * tool cat [FILE ...]\n' in r.output
	assert '  * tool dog [FILE ...]\n' in r.output
	assert '    tool give-the-dog-a-bone\n' in r.output
	assert r.output.endswith('  tool help <subcommand>\n')

def test_cli_help_single():
	r = invoke(['help', 'dog'])
	assert r.exit_code == 0
	assert r.output == 'usage: tool dog [FILE ...]\ncondogenate one or more files\n'

def test_cli_cat_files_and_stdin(tmp_path):
	f = tmp_path / 'a.txt'
	f.write_text('one\ntwo\n')
	r = invoke(['cat', str(f), '-'], input='three\n')
	assert r.exit_code == 0
	assert r.output == 'one\ntwo\nthree\n'

def test_cli_cat_passes_bytes_through(tmp_path):
	f = tmp_path / 'blob.bin'
	f.write_bytes(b'\xff\xfe\x00ok\n')
	r = invoke(['cat', str(f)])
	assert r.exit_code == 0
	assert r.exception is None
	assert r.stdout_bytes == b'\xff\xfe\x00ok\n'

def test_cli_default_runs_dog():
	r = invoke([], input='woof\n')
	assert r.exit_code == 0
	assert r.output == 'woof\n'

def test_cli_missing_file_warns(tmp_path):
	r = invoke(['cat', str(tmp_path / 'missing')])
	assert r.exit_code == 0
	assert 'tool: ' in r.output and 'missing' in r.output

def test_cli_multi_word_command():
	r = invoke(['give-the-dog-a-bone', 'steak'])
	assert r.exit_code == 0
	assert r.output == 'The dog takes the steak.\n'
	assert 'The dog takes the bone.' in invoke(['give_the_dog_a_bone']).output

def test_cli_unknown_command():
	r = invoke(['frobnicate'])
	assert r.exit_code == 1
	assert "tool: unknown command 'frobnicate'." in r.output
	assert "tool: Type 'tool help' for help." in r.output

def test_make_command_forwards_flags():
	seen = []
	class Recorder(Thingy):
		def cmd__x(self, *args):
			seen.append((self.prog, args))
	cmd = make_command(Recorder, 'rec')
	r = CliRunner().invoke(cmd, ['x', '--verbose', '-n', '3', '--help'])
	assert r.exit_code == 0
	assert seen == [('rec', ('--verbose', '-n', '3', '--help'))]

def test_make_command_keeps_double_dash():
	seen = []
	class Recorder(Thingy):
		def cmd__x(self, *args):
			seen.append(args)
	cmd = make_command(Recorder, 'rec')
	r = CliRunner().invoke(cmd, ['x', '--', '-n', 'a'])
	assert r.exit_code == 0
	assert seen == [('--', '-n', 'a')]
	r = CliRunner().invoke(cmd, ['--', 'x'])
	assert r.exit_code == 1
	assert "rec: unknown command '--'." in r.output
	assert seen == [('--', '-n', 'a')]

def test_make_command_defaults_to_process_name():
	seen = []
	class Recorder(Thingy):
		def cmd__x(self, *args):
			seen.append((self.prog, args))
	make_command(Recorder, 'rec').main(['x', 'y'], standalone_mode=False)
	assert seen == [(settings.PROGNAME, ('y',))]

def test_example_is_a_thingy():
	t = Example(prog='tool')
	assert t.bones == []
	assert t.subcommand_list() == ['cat', 'dog', 'give-the-dog-a-bone', 'help']
