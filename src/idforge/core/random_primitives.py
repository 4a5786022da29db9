"""
Random primitives

Seedable source of the low-level random draws every generator builds on:
coin flips, bounded integers, pattern filling and date ranges.
"""

import random
import string
from datetime import date, timedelta
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

DIGIT_PLACEHOLDER = "#"
LETTER_PLACEHOLDER = "?"

_ALPHANUMERIC = string.ascii_letters + string.digits


class RandomPrimitives:
    """Random draws shared by the assembler and all sub-record providers.

    The same seed always yields the same sequence of draws, so a seeded
    generator reproduces the same persons.

    Attributes:
        seed: Seed passed at construction (None means system entropy)

    Example:
        >>> rnd = RandomPrimitives(seed=7)
        >>> len(rnd.fill_digits("###-###"))
        7
    """

    def __init__(self, *, seed: Optional[int] = None):
        """Initialize the random source.

        Args:
            seed: Seed for reproducible draws
        """
        self.seed = seed
        self._random = random.Random(seed)

    def boolean_choice(self) -> bool:
        """Fair coin flip."""
        return self._random.random() < 0.5

    def int_between(self, low: int, high: int) -> int:
        """Uniform integer in [low, high].

        Raises:
            ValueError: If low > high
        """
        if low > high:
            raise ValueError(f"Lower bound {low} exceeds upper bound {high}")
        return self._random.randint(low, high)

    def fill_digits(self, pattern: str) -> str:
        """Replace every '#' in the pattern with a random digit."""
        return "".join(
            str(self._random.randint(0, 9)) if c == DIGIT_PLACEHOLDER else c
            for c in pattern
        )

    def fill_letters(self, pattern: str) -> str:
        """Replace every '?' in the pattern with a random upper-case letter."""
        return "".join(
            self._random.choice(string.ascii_uppercase) if c == LETTER_PLACEHOLDER else c
            for c in pattern
        )

    def fill_pattern(self, pattern: str) -> str:
        """Replace '#' with digits and '?' with upper-case letters."""
        return self.fill_letters(self.fill_digits(pattern))

    def random_alphanumeric(self, length: int) -> str:
        """Random string of ASCII letters and digits."""
        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        return "".join(self._random.choice(_ALPHANUMERIC) for _ in range(length))

    def random_letters(self, length: int) -> str:
        """Random string of upper-case ASCII letters."""
        return self.fill_letters(LETTER_PLACEHOLDER * length)

    def random_element(self, elements: Sequence[T]) -> T:
        """Uniformly pick one element.

        Raises:
            ValueError: If the sequence is empty
        """
        if not elements:
            raise ValueError("Cannot pick from an empty sequence")
        return self._random.choice(elements)

    def random_date_between(self, start: date, end: date) -> date:
        """Uniform date in [start, end], both inclusive.

        Raises:
            ValueError: If start is after end
        """
        if start > end:
            raise ValueError(f"Start date {start} is after end date {end}")
        offset = self._random.randint(0, (end - start).days)
        return start + timedelta(days=offset)
