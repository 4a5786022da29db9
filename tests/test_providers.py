"""Tests for sub-record and identifier providers."""

import re
from datetime import date

import pytest

from idforge.core.person import Address, Company, Sex
from idforge.core.providers import (
    AddressProvider,
    CompanyEmailProvider,
    CompanyProvider,
    EmailProvider,
    NipProvider,
    PassportNumberProvider,
    PatternIdentityCardNumberProvider,
    PeselFactory,
    PeselProvider,
    PolishIdentityCardNumberProvider,
    SsnFactory,
    VatNumberProvider,
)
from idforge.core.random_primitives import RandomPrimitives
from idforge.utils.validators import (
    validate_email,
    validate_nip,
    validate_pesel,
    validate_polish_id_card,
    validate_ssn,
)


class TestEmailProviders:
    """Tests for personal and company email providers."""

    def test_personal_email_shapes(self, pl_locale_data, random_primitives, pl_corpus):
        """Test local parts and domains of personal emails."""
        for _ in range(30):
            email = EmailProvider(pl_locale_data, random_primitives, "Łukasz", "Wójcik").get()
            local_part, domain = email.split("@")

            assert local_part in {"lukasz.wojcik", "lukaszwojcik", "lwojcik"}
            assert domain in pl_corpus["personal_email_domains"]
            assert validate_email(email)

    def test_company_email(self, random_primitives):
        company = Company(
            name="Żabka S.A.", domain="zabka.pl", email="biuro@zabka.pl",
            vat_identification_number="1234563218",
        )

        email = CompanyEmailProvider(random_primitives, "Anna Maria", "Nowak-Kowalska", company).get()

        assert email == "annamaria.nowakkowalska@zabka.pl"

    def test_non_latin_names(self, en_locale_data, random_primitives):
        """Test that names folding to nothing get a drawn token."""
        for _ in range(30):
            email = EmailProvider(en_locale_data, random_primitives, "张", "伟").get()
            local_part = email.split("@")[0]

            assert re.fullmatch(r"[a-z]+\.[a-z]+|[a-z]+", local_part)
            assert validate_email(email)

    def test_non_latin_company_email(self, random_primitives):
        company = Company(
            name="Acme", domain="acme.com", email="info@acme.com",
            vat_identification_number="11-1111111",
        )

        email = CompanyEmailProvider(random_primitives, "张", "伟", company).get()

        assert re.fullmatch(r"[a-z]{6}\.[a-z]{6}@acme\.com", email)

    def test_mixed_script_keeps_latin_part(self, random_primitives):
        company = Company(
            name="Acme", domain="acme.com", email="info@acme.com",
            vat_identification_number="11-1111111",
        )

        email = CompanyEmailProvider(random_primitives, "Wei 伟", "Zhang", company).get()

        assert email == "wei.zhang@acme.com"


class TestCompanyProvider:
    """Tests for company generation."""

    def test_en_company(self, en_locale_data, random_primitives, en_corpus):
        provider = CompanyProvider(
            en_locale_data, random_primitives, VatNumberProvider(en_locale_data, random_primitives)
        )

        for _ in range(20):
            company = provider.get()

            assert isinstance(company, Company)
            assert any(company.name.startswith(n) for n in en_corpus["company_names"])
            assert re.fullmatch(r"[a-z0-9]+\.[a-z.]+", company.domain)
            assert company.email.endswith("@" + company.domain)
            assert validate_email(company.email)
            assert re.fullmatch(r"\d{2}-\d{7}", company.vat_identification_number)

    def test_pl_company_uses_nip(self, pl_locale_data, random_primitives):
        provider = CompanyProvider(pl_locale_data, random_primitives, NipProvider(random_primitives))

        assert validate_nip(provider.get().vat_identification_number)

    def test_nip_provider(self, random_primitives):
        """Test that every generated NIP has a valid control digit."""
        for _ in range(100):
            nip = NipProvider(random_primitives).get()

            assert validate_nip(nip)
            assert nip[0] != "0"


class TestAddressProvider:
    """Tests for address generation."""

    def test_address_fields(self, pl_locale_data, random_primitives, pl_corpus):
        apartments = set()
        for _ in range(50):
            address = AddressProvider(pl_locale_data, random_primitives).get()

            assert isinstance(address, Address)
            assert address.street in pl_corpus["streets"]
            assert address.city in pl_corpus["cities"]
            assert 1 <= int(address.street_number) <= 999
            assert re.fullmatch(r"\d{2}-\d{3}", address.postal_code)
            apartments.add(address.apartment_number != "")

        assert apartments == {True, False}

    def test_address_lines(self):
        address = Address(
            street="Main Street", street_number="10", apartment_number="4",
            postal_code="12345", city="Springfield",
        )

        assert address.address_line1 == "Main Street 10 APT 4"
        assert address.address_line2 == "12345 Springfield"
        assert str(address) == "Main Street 10 APT 4\n12345 Springfield"

    def test_address_line_without_apartment(self):
        address = Address(
            street="Main Street", street_number="10", apartment_number="",
            postal_code="12345", city="Springfield",
        )

        assert address.address_line1 == "Main Street 10"


class TestDocumentProviders:
    """Tests for passport and identity card numbers."""

    def test_passport_number(self, en_locale_data, random_primitives):
        value = PassportNumberProvider(en_locale_data, random_primitives).get()

        assert value
        assert "#" not in value and "?" not in value

    def test_pattern_identity_card(self, en_locale_data, random_primitives):
        value = PatternIdentityCardNumberProvider(en_locale_data, random_primitives).get()

        assert value
        assert "#" not in value and "?" not in value

    def test_polish_identity_card(self, random_primitives):
        for _ in range(100):
            value = PolishIdentityCardNumberProvider(random_primitives).get()

            assert validate_polish_id_card(value)


class TestNationalIdentificationNumbers:
    """Tests for PESEL and SSN factories."""

    @pytest.mark.parametrize(
        "dob,expected_prefix",
        [
            (date(1944, 5, 14), "440514"),
            (date(1899, 12, 31), "999231"),
            (date(2005, 1, 9), "052109"),
            (date(2101, 3, 1), "014301"),
            (date(2210, 7, 20), "106720"),
        ],
    )
    def test_pesel_encodes_birth_date(self, random_primitives, dob, expected_prefix):
        """Test that the month carries the century offset."""
        pesel = PeselFactory(random_primitives).produce(dob, Sex.FEMALE).get()

        assert pesel.startswith(expected_prefix)
        assert validate_pesel(pesel)

    @pytest.mark.parametrize("sex,parity", [(Sex.MALE, 1), (Sex.FEMALE, 0)])
    def test_pesel_sex_digit(self, random_primitives, sex, parity):
        for _ in range(30):
            pesel = PeselFactory(random_primitives).produce(date(1990, 1, 1), sex).get()

            assert int(pesel[9]) % 2 == parity

    def test_pesel_factory_supports(self, random_primitives):
        """Test the birth-date range a PESEL can encode."""
        factory = PeselFactory(random_primitives)

        assert factory.supports(date(1800, 1, 1))
        assert factory.supports(date(2299, 12, 31))
        assert not factory.supports(date(1799, 12, 31))
        assert not factory.supports(date(2300, 1, 1))
        assert SsnFactory(random_primitives).supports(date(1700, 1, 1))

    def test_pesel_unsupported_century(self, random_primitives):
        provider = PeselProvider(random_primitives, date(1750, 1, 1), Sex.MALE)

        with pytest.raises(ValueError, match="1750"):
            provider.get()

    def test_ssn(self, random_primitives):
        """Test that generated SSNs avoid never-issued ranges."""
        factory = SsnFactory(random_primitives)

        for _ in range(200):
            ssn = factory.produce(date(1990, 1, 1), Sex.MALE).get()

            assert validate_ssn(ssn)

    def test_factories_are_seeded(self):
        first = PeselFactory(RandomPrimitives(seed=3)).produce(date(1990, 1, 1), Sex.MALE).get()
        second = PeselFactory(RandomPrimitives(seed=3)).produce(date(1990, 1, 1), Sex.MALE).get()

        assert first == second
