"""
This module implements the `numeral samples` command.
"""

from numeral.converter import roman_to_int

SAMPLES = ["III", "LVIII", "MCMXCIV", "XIV", "CDXLIV"]

def samples(plain_output: bool) -> int: # pylint: disable=unused-argument
	"""
	Entry point for `numeral samples`

	Print a handful of numerals next to their decimal values, for checking the converter by eye.
	"""

	for sample in SAMPLES:
		print(f"{sample} -> {roman_to_int(sample)}")

	return 0
