"""
This module implements the `numeral roman2dec` command.
"""

import argparse

from rich.markup import escape

import numeral
from numeral.converter import roman_to_int


def roman2dec(plain_output: bool) -> int:
	"""
	Entry point for `numeral roman2dec`
	"""

	parser = argparse.ArgumentParser(description="Convert a Roman numeral to a decimal number.")
	parser.add_argument("-n", "--no-newline", dest="newline", action="store_false", help="don’t end output with a newline")
	parser.add_argument("numbers", metavar="NUMERAL", nargs="*", help="a Roman numeral")
	args = parser.parse_args()

	lines = numeral.get_input_lines(args.numbers)

	if not lines:
		numeral.print_error("No numerals given. Pass one as an argument or on stdin, e.g. [bash]numeral roman2dec XIV[/].", plain_output=plain_output)
		return numeral.InvalidArgumentsException.code

	for line in lines:
		try:
			if args.newline:
				print(roman_to_int(line))
			else:
				print(roman_to_int(line), end="")
		except numeral.InvalidInputException:
			numeral.print_error(f"Not a Roman numeral: [text]{escape(line)}[/]", plain_output=plain_output)
			return numeral.InvalidInputException.code
		except numeral.InvalidSymbolException as ex:
			numeral.print_error(f"Not a Roman numeral: [text]{escape(line)}[/]. Invalid symbol: [text]{escape(ex.symbol)}[/]", plain_output=plain_output)
			return ex.code

	return 0
