"""
National identification number factories

A factory is parameterized by a person's date of birth and sex and produces a
provider whose get() returns the number.

- PeselFactory: Polish PESEL, encodes birth date and sex, with control digit
- SsnFactory: US Social Security Number, independent of birth date and sex
"""

from dataclasses import dataclass
from datetime import date

from idforge.core.person import Sex
from idforge.core.random_primitives import RandomPrimitives
from idforge.utils.validators import pesel_checksum


# Month offset encoding the century of birth in a PESEL
PESEL_CENTURY_OFFSETS = {
    18: 80,
    19: 0,
    20: 20,
    21: 40,
    22: 60,
}

SSN_FORBIDDEN_AREA = 666
SSN_MAX_AREA = 899


@dataclass
class PeselProvider:
    """PESEL for one person."""
    random: RandomPrimitives
    date_of_birth: date
    sex: Sex

    def get(self) -> str:
        century = self.date_of_birth.year // 100
        if century not in PESEL_CENTURY_OFFSETS:
            raise ValueError(
                f"PESEL cannot encode birth year {self.date_of_birth.year}"
            )
        month = self.date_of_birth.month + PESEL_CENTURY_OFFSETS[century]

        # Sex digit: odd for male, even for female
        sex_digit = 2 * self.random.int_between(0, 4)
        if self.sex is Sex.MALE:
            sex_digit += 1

        prefix = (
            f"{self.date_of_birth.year % 100:02d}{month:02d}{self.date_of_birth.day:02d}"
            f"{self.random.fill_digits('###')}{sex_digit}"
        )
        return f"{prefix}{pesel_checksum(prefix)}"


@dataclass
class SsnProvider:
    """Social Security Number in AAA-GG-SSSS form."""
    random: RandomPrimitives

    def get(self) -> str:
        area = SSN_FORBIDDEN_AREA
        while area == SSN_FORBIDDEN_AREA:
            area = self.random.int_between(1, SSN_MAX_AREA)
        group = self.random.int_between(1, 99)
        serial = self.random.int_between(1, 9999)
        return f"{area:03d}-{group:02d}-{serial:04d}"


class PeselFactory:
    def __init__(self, random: RandomPrimitives):
        self.random = random

    def supports(self, date_of_birth: date) -> bool:
        """PESEL encodes birth years 1800-2299 only."""
        return date_of_birth.year // 100 in PESEL_CENTURY_OFFSETS

    def produce(self, date_of_birth: date, sex: Sex) -> PeselProvider:
        return PeselProvider(self.random, date_of_birth, sex)


class SsnFactory:
    def __init__(self, random: RandomPrimitives):
        self.random = random

    def supports(self, date_of_birth: date) -> bool:
        return True

    def produce(self, date_of_birth: date, sex: Sex) -> SsnProvider:
        return SsnProvider(self.random)
