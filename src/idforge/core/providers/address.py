"""Address provider."""

from idforge.core.locale_data import CITIES, POSTAL_CODE_FORMATS, STREETS, LocaleData
from idforge.core.person import Address
from idforge.core.random_primitives import RandomPrimitives


MAX_STREET_NUMBER = 999
MAX_APARTMENT_NUMBER = 350


class AddressProvider:
    """Postal addresses built from the locale's streets, cities and postal code formats.

    Half of the generated addresses carry an apartment number.
    """

    def __init__(self, locale_data: LocaleData, random: RandomPrimitives):
        self.locale_data = locale_data
        self.random = random

    def get(self) -> Address:
        apartment_number = ""
        if self.random.boolean_choice():
            apartment_number = str(self.random.int_between(1, MAX_APARTMENT_NUMBER))

        return Address(
            street=self.locale_data.random_value(STREETS),
            street_number=str(self.random.int_between(1, MAX_STREET_NUMBER)),
            apartment_number=apartment_number,
            postal_code=self.random.fill_digits(self.locale_data.random_value(POSTAL_CODE_FORMATS)),
            city=self.locale_data.random_value(CITIES),
        )
