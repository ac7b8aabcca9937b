"""
This module implements the `numeral help` command.
"""

from numeral.main import get_commands


def numeral_help(plain_output: bool) -> int: # pylint: disable=unused-argument
	"""
	Entry point for `numeral help`

	help() is a built-in function so this function is called numeral_help().
	"""

	commands = get_commands()

	print("The following commands are available:")

	for command in commands:
		print(command)

	return 0
