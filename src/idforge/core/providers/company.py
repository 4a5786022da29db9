"""
Company provider

Generates employer records: name, web domain, contact email and a VAT
identification number in the locale's format.
"""

from idforge.core.locale_data import (
    COMPANY_EMAIL_PREFIXES,
    COMPANY_NAMES,
    COMPANY_SUFFIXES,
    DOMAIN_SUFFIXES,
    VAT_FORMATS,
    LocaleData,
)
from idforge.core.person import Company
from idforge.core.providers.email import name_token
from idforge.core.random_primitives import RandomPrimitives
from idforge.utils.validators import nip_checksum


class VatNumberProvider:
    """VAT identification number drawn from the locale's format list."""

    def __init__(self, locale_data: LocaleData, random: RandomPrimitives):
        self.locale_data = locale_data
        self.random = random

    def get(self) -> str:
        return self.random.fill_digits(self.locale_data.random_value(VAT_FORMATS))


class NipProvider:
    """Polish NIP: three-digit tax office code, six digits and a mod-11 check digit.

    Prefixes whose check value would be 10 cannot form a valid NIP and are redrawn.
    """

    def __init__(self, random: RandomPrimitives):
        self.random = random

    def get(self) -> str:
        while True:
            prefix = str(self.random.int_between(101, 999)) + self.random.fill_digits("######")
            control = nip_checksum(prefix)
            if control != 10:
                return f"{prefix}{control}"


class CompanyProvider:
    """Company records for one locale.

    Args:
        locale_data: Corpus of the locale
        random: Random source
        vat_provider: Provider of VAT identification numbers
    """

    def __init__(self, locale_data: LocaleData, random: RandomPrimitives, vat_provider):
        self.locale_data = locale_data
        self.random = random
        self.vat_provider = vat_provider

    def get(self) -> Company:
        base_name = self.locale_data.random_value(COMPANY_NAMES)
        name = base_name
        if self.random.boolean_choice():
            name = f"{base_name} {self.locale_data.random_value(COMPANY_SUFFIXES)}"

        domain = f"{name_token(self.random, base_name)}.{self.locale_data.random_value(DOMAIN_SUFFIXES)}"
        email = f"{self.locale_data.random_value(COMPANY_EMAIL_PREFIXES)}@{domain}"

        return Company(
            name=name,
            domain=domain,
            email=email,
            vat_identification_number=self.vat_provider.get(),
        )
