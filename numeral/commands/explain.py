"""
This module implements the `numeral explain` command.
"""

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

import numeral
from numeral.converter import scan


def explain(plain_output: bool) -> int:
	"""
	Entry point for `numeral explain`
	"""

	parser = argparse.ArgumentParser(description="Show, step by step, how a Roman numeral is read.")
	parser.add_argument("numbers", metavar="NUMERAL", nargs="*", help="a Roman numeral")
	args = parser.parse_args()

	console = Console(highlight=False, theme=numeral.RICH_THEME)
	lines = numeral.get_input_lines(args.numbers)

	if not lines:
		numeral.print_error("No numerals given. Pass one as an argument or on stdin, e.g. [bash]numeral explain MCMXCIV[/].", plain_output=plain_output)
		return numeral.InvalidArgumentsException.code

	for line in lines:
		# Collect all steps first, so that we don't print half a table for a bad numeral
		try:
			steps = list(scan(line))
		except numeral.InvalidInputException:
			numeral.print_error(f"Not a Roman numeral: [text]{escape(line)}[/]", plain_output=plain_output)
			return numeral.InvalidInputException.code
		except numeral.InvalidSymbolException as ex:
			numeral.print_error(f"Not a Roman numeral: [text]{escape(line)}[/]. Invalid symbol: [text]{escape(ex.symbol)}[/]", plain_output=plain_output)
			return ex.code

		if plain_output:
			for step in steps:
				print(f"{step.position}\t{step.symbols}\t{'subtractive' if step.subtractive else 'additive'}\t{step.increment}\t{step.total}")
			print(f"{line} -> {steps[-1].total}")
		else:
			table = Table(title=escape(line), show_footer=True, box=box.HORIZONTALS)
			table.add_column("Position", style="dim", justify="right")
			table.add_column("Symbols", style="bold", footer="Total")
			table.add_column("Rule")
			table.add_column("Adds", justify="right")
			table.add_column("Running total", justify="right", footer=f"[val]{steps[-1].total}[/]")

			for step in steps:
				rule = f"{step.symbols[1]} − {step.symbols[0]}" if step.subtractive else step.symbols
				table.add_row(str(step.position), step.symbols, rule, str(step.increment), str(step.total))

			console.print(table)

	return 0
