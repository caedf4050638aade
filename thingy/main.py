"""Program entry point for the bundled example tool.

Logging is configured here; the framework itself only creates loggers.
"""
from __future__ import annotations
import logging
from config.settings import LOG_LEVEL
from thingy.cli.commands import cli

def main():  # pragma: no cover - thin wrapper
	logging.basicConfig(level=LOG_LEVEL, format='%(name)s: %(levelname)s: %(message)s')
	cli()

if __name__ == '__main__':  # pragma: no cover
	main()
