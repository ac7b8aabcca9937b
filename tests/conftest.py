"""
Customization functions for pytest.
"""

from typing import List, Tuple

import pytest
import roman

pytest.register_assert_rewrite("helpers")

@pytest.fixture(name="standard_numerals", scope="session")
def fixture_standard_numerals() -> List[Tuple[str, int]]:
	"""
	Return every standard Roman numeral from 1 to 3999 along with its value.
	"""
	return [(roman.toRoman(number), number) for number in range(1, 4000)]
