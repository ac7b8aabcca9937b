#!/usr/bin/env python3
"""
Defines various package-level constants, the exception hierarchy, and console helper functions.
"""

import os
import sys
from typing import List, Optional, Union

from rich.console import Console
from rich.theme import Theme
import regex

VERSION = "1.0.0"
RICH_THEME = Theme({
	"text": "bright_blue",
	"val": "bright_blue",
	"bash": "bright_blue"
})

class NumeralException(Exception):
	""" Wrapper class for numeral exceptions """

	code = 0

# Note that we skip error codes 1 and 2 as they have special meanings:
# http://www.tldp.org/LDP/abs/html/exitcodes.html

class InvalidInputException(NumeralException):
	""" Input is not a non-empty string """
	code = 3

class InvalidSymbolException(NumeralException):
	""" Character is not a Roman numeral symbol """
	code = 4

	def __init__(self, symbol: str):
		super().__init__(f"Invalid symbol: {symbol}")
		self.symbol = symbol

class InvalidArgumentsException(NumeralException):
	""" Invalid arguments """
	code = 5

def prep_output(message: str, plain_output: bool = False) -> str:
	"""
	Return a message formatted for the chosen output style, i.e., color or plain.
	"""

	if plain_output:
		# Replace color markup with `
		message = regex.sub(r"\[(?:/|text|val|bash)(?:=[^\]]*?)*\]", "`", message)
		message = regex.sub(r"`+", "`", message)

	return message

def print_error(message: Union[NumeralException, str], plain_output: bool = False) -> None:
	"""
	Helper function to print a colored error message to stderr.

	Allowed BBCode tags:
	[text] - Non-semantic text that requires color, usually user input
	[val] - A computed value
	[bash] - A command or flag of a command
	"""

	console = Console(file=sys.stderr, highlight=False, theme=RICH_THEME, force_terminal=is_called_from_parallel()) # force_terminal prints colors when called from GNU Parallel

	if plain_output:
		console.print(f"[Error] {prep_output(str(message), True)}")
	else:
		console.print(f"[white on red bold] Error [/] {message}")

def is_called_from_parallel() -> Optional[bool]:
	"""
	Decide if we're being called from GNU parallel.

	This is passed directly to the force_terminal option of rich.console(),
	meaning that `None` means "guess terminal status".
	"""

	import psutil # pylint: disable=import-outside-toplevel

	try:
		for line in psutil.Process(psutil.Process().ppid()).cmdline():
			if regex.search(fr"{os.sep}parallel$", line):
				return True
	except psutil.Error:
		# If we can't figure it out, don't worry about it
		pass

	return None

def get_input_lines(arguments: List[str]) -> List[str]:
	"""
	Collect command input: lines from stdin if it isn't a terminal, followed by the command-line arguments.

	INPUTS
	arguments: The positional arguments given to the command

	OUTPUTS
	A list of input strings, with line endings removed from the stdin lines
	"""

	lines = []

	if not sys.stdin.isatty():
		for line in sys.stdin:
			lines.append(line.rstrip("\r\n"))

	lines.extend(arguments)

	return lines
