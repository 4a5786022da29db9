"""
Identity document number providers

- PassportNumberProvider: pattern-based passport numbers
- PatternIdentityCardNumberProvider: pattern-based identity card numbers
- PolishIdentityCardNumberProvider: Polish ID card numbers with check digit

Note: generated numbers are for testing only and carry no legal meaning.
"""

from idforge.core.locale_data import (
    IDENTITY_CARD_FORMATS,
    PASSPORT_NUMBER_FORMATS,
    LocaleData,
)
from idforge.core.random_primitives import RandomPrimitives
from idforge.utils.validators import polish_id_card_checksum


class PassportNumberProvider:
    """Passport numbers filled from the locale's formats ('?' letter, '#' digit)."""

    def __init__(self, locale_data: LocaleData, random: RandomPrimitives):
        self.locale_data = locale_data
        self.random = random

    def get(self) -> str:
        return self.random.fill_pattern(self.locale_data.random_value(PASSPORT_NUMBER_FORMATS))


class PatternIdentityCardNumberProvider:
    """Identity card numbers filled from the locale's formats."""

    def __init__(self, locale_data: LocaleData, random: RandomPrimitives):
        self.locale_data = locale_data
        self.random = random

    def get(self) -> str:
        return self.random.fill_pattern(self.locale_data.random_value(IDENTITY_CARD_FORMATS))


class PolishIdentityCardNumberProvider:
    """Polish identity card numbers: series of three letters, check digit, five digits.

    Example:
        >>> PolishIdentityCardNumberProvider(random).get()
        'ABA300000'
    """

    def __init__(self, random: RandomPrimitives):
        self.random = random

    def get(self) -> str:
        series = self.random.random_letters(3)
        number = self.random.fill_digits("#####")
        check = polish_id_card_checksum(series, number)
        return f"{series}{check}{number}"
