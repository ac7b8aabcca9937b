"""
This file contains the entry point for the `numeral` command.
"""

import argparse
import importlib
import pkgutil
import sys
from typing import List

import numeral.commands


def get_commands() -> List[str]:
	"""
	Helper function to generate a list of available commands from all of the submodules in the numeral.commands package
	"""

	commands = []
	for module_info in pkgutil.iter_modules(numeral.commands.__path__):
		if module_info.name != "version":
			commands.append(module_info.name)
	commands.sort()

	return commands

def main() -> None:
	"""
	Entry point for the main `numeral` executable.

	This function delegates subcommands (like `numeral roman2dec`) to individual submodules under `numeral.commands`.
	"""

	# If we're asked for the version, short circuit and exit
	if len(sys.argv) == 2 and (sys.argv[1] == "-v" or sys.argv[1] == "--version"):
		module = importlib.import_module("numeral.commands.version")
		sys.exit(getattr(module, "version")(False))

	commands = get_commands()

	parser = argparse.ArgumentParser(description="Tools for reading Roman numerals.")
	parser.add_argument("-p", "--plain", dest="plain_output", action="store_true", help="print plain text output, without tables or formatting")
	parser.add_argument("-v", "--version", action="store_true", help="print version number and exit")
	parser.add_argument("command", metavar="COMMAND", choices=commands + ["version"], help="one of: " + " ".join(commands))
	parser.add_argument("arguments", metavar="ARGS", nargs="*", help="arguments for the subcommand")

	# We do some hand-parsing of high-level args, because argparse
	# can expect flags at any point in the command. We'll pass any args up to
	# and including the subcommand to the main argparse instance, then pass
	# the subcommand and its args to the final function we call.
	main_args = []
	subcommand_args = []
	parsing_subcommand = False
	for arg in sys.argv[1:]:
		if not parsing_subcommand and arg.startswith("-"):
			main_args.append(arg)
		elif not parsing_subcommand and not arg.startswith("-"):
			main_args.append(arg)
			subcommand_args.append(arg)
			parsing_subcommand = True
		elif parsing_subcommand:
			subcommand_args.append(arg)

	args = parser.parse_args(main_args)

	# Change argv to our subcommand values, so that arg parsing by child functions works as expected
	sys.argv = subcommand_args

	command_module = f"numeral.commands.{args.command}"
	if args.command == "help":
		command_function = "numeral_help"  # Avoid name conflict with built-in function
	else:
		command_function = args.command

	# Import command module and call command entrypoint
	module = importlib.import_module(command_module)

	try:
		sys.exit(getattr(module, command_function)(args.plain_output))
	except KeyboardInterrupt:
		sys.exit(130) # See http://www.tldp.org/LDP/abs/html/exitcodes.html
