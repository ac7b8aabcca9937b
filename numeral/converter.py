#!/usr/bin/env python3
"""
Defines functions for converting Roman numerals to decimal numbers.
"""

from types import MappingProxyType
from typing import Iterator, NamedTuple

import numeral


SYMBOL_TABLE = MappingProxyType({
	"I": 1,
	"V": 5,
	"X": 10,
	"L": 50,
	"C": 100,
	"D": 500,
	"M": 1000
})

SYMBOLS = "".join(SYMBOL_TABLE)

class ScanStep(NamedTuple):
	"""
	One step of the left-to-right scan over a numeral.
	"""

	position: int
	symbols: str
	increment: int
	total: int
	subtractive: bool

def _scan(roman: str) -> Iterator[ScanStep]:
	total = 0
	i = 0

	while i < len(roman):
		current_value = SYMBOL_TABLE.get(roman[i])

		if current_value is None:
			raise numeral.InvalidSymbolException(roman[i])

		next_value = SYMBOL_TABLE.get(roman[i + 1]) if i + 1 < len(roman) else None

		# A smaller symbol before a larger one is a subtractive pair, like IV or CM
		if next_value is not None and current_value < next_value:
			total += next_value - current_value
			yield ScanStep(i, roman[i:i + 2], next_value - current_value, total, True)
			i += 2
		else:
			total += current_value
			yield ScanStep(i, roman[i], current_value, total, False)
			i += 1

def scan(string: str) -> Iterator[ScanStep]:
	"""
	Scan a Roman numeral from left to right, one step per symbol or subtractive pair.

	The input is checked immediately; invalid symbols are raised when the scan reaches them.

	INPUTS
	string: A Roman numeral, in any case

	OUTPUTS
	An iterator of ScanStep tuples. The `total` of the last step is the value of the numeral.
	"""

	if not isinstance(string, str) or string.strip() == "":
		raise numeral.InvalidInputException("Input must be a non-empty Roman numeral string.")

	return _scan(string.upper())

def roman_to_int(string: str) -> int:
	"""
	Convert a Roman numeral to a decimal number.

	Any adjacent pair where the left symbol is worth less than the right one is
	treated as subtractive, so nonstandard numerals like IC (99) are accepted.

	INPUTS
	string: A Roman numeral, in any case

	OUTPUTS
	The decimal value of the numeral
	"""

	total = 0

	for step in scan(string):
		total = step.total

	return total
