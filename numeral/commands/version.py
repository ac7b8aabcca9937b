"""
This module implements the `numeral version` command.
"""

import numeral

def version(plain_output: bool) -> int: # pylint: disable=unused-argument
	"""
	Entry point for `numeral version`.
	"""

	print(f"{numeral.VERSION}")
	return 0
