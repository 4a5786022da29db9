"""
Person generation pipeline

A fixed sequence of steps, each filling exactly one draft field if it is still
unset. A step may only read fields filled by steps before it:

    sex -> company -> first name -> middle name -> last name -> email
    -> username -> telephone number -> age -> date of birth -> company email
    -> password -> identity card number -> identification number
    -> passport number -> address -> job title
"""

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Callable, Protocol

from idforge.core.locale_data import (
    FIRST_NAMES,
    JOB_TITLES,
    LAST_NAMES,
    TELEPHONE_NUMBER_FORMATS,
    LocaleData,
)
from idforge.core.person import PersonDraft, Sex
from idforge.core.providers.email import CompanyEmailProvider, EmailProvider
from idforge.core.random_primitives import RandomPrimitives
from idforge.core.time_provider import TimeProvider, minus_years, years_between
from idforge.errors import PipelineOrderError
from idforge.utils.text import strip_accents


PASSWORD_LENGTH = 8


class Provider(Protocol):
    def get(self) -> Any: ...


class NationalIdentificationNumberFactory(Protocol):
    def supports(self, date_of_birth: date) -> bool: ...

    def produce(self, date_of_birth: date, sex: Sex) -> Provider: ...


@dataclass(frozen=True)
class GenerationServices:
    """Collaborators the pipeline draws from.

    Attributes:
        locale: Locale code of the corpus
        random: Shared random source
        locale_data: Corpus lookups
        time_provider: Current-date source
        company_provider: Produces Company records
        address_provider: Produces Address records
        identity_card_provider: Produces national identity card numbers
        passport_provider: Produces passport numbers
        nin_factory: Produces identification number providers from birth date and sex
        min_age: Lower bound for drawn ages
        max_age: Upper bound for drawn ages
    """
    locale: str
    random: RandomPrimitives
    locale_data: LocaleData
    time_provider: TimeProvider
    company_provider: Provider
    address_provider: Provider
    identity_card_provider: Provider
    passport_provider: Provider
    nin_factory: NationalIdentificationNumberFactory
    min_age: int
    max_age: int


Step = Callable[[PersonDraft, GenerationServices], PersonDraft]


def _require(draft: PersonDraft, *names: str) -> None:
    missing = [name for name in names if getattr(draft, name) is None]
    if missing:
        raise PipelineOrderError(f"Step ran before {', '.join(missing)} was resolved")


def generate_sex(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.sex is not None:
        return draft
    sex = Sex.MALE if services.random.boolean_choice() else Sex.FEMALE
    return replace(draft, sex=sex)


def generate_company(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.company is not None:
        return draft
    return replace(draft, company=services.company_provider.get())


def generate_first_name(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.first_name is not None:
        return draft
    _require(draft, "sex")
    return replace(
        draft,
        first_name=services.locale_data.values_of_type(FIRST_NAMES, draft.sex.value),
    )


def generate_middle_name(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.middle_name is not None:
        return draft
    _require(draft, "sex")
    middle_name = ""
    if services.random.boolean_choice():
        middle_name = services.locale_data.values_of_type(FIRST_NAMES, draft.sex.value)
    return replace(draft, middle_name=middle_name)


def generate_last_name(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.last_name is not None:
        return draft
    _require(draft, "sex")
    return replace(
        draft,
        last_name=services.locale_data.values_of_type(LAST_NAMES, draft.sex.value),
    )


def generate_email(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.email is not None:
        return draft
    _require(draft, "first_name", "last_name")
    provider = EmailProvider(
        services.locale_data, services.random, draft.first_name, draft.last_name
    )
    return replace(draft, email=provider.get())


def generate_username(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.username is not None:
        return draft
    _require(draft, "first_name", "last_name")
    if services.random.boolean_choice():
        username = draft.first_name[:1] + draft.last_name
    else:
        username = draft.first_name + draft.last_name[:1]
    return replace(draft, username=strip_accents(username).lower())


def generate_telephone_number(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.telephone_number is not None:
        return draft
    number_format = draft.telephone_number_format
    if number_format is None:
        number_format = services.locale_data.random_value(TELEPHONE_NUMBER_FORMATS)
    return replace(draft, telephone_number=services.random.fill_digits(number_format))


def generate_age(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    # Date of birth wins over an explicit age
    if draft.date_of_birth is not None:
        today = services.time_provider.current_date()
        return replace(draft, age=years_between(draft.date_of_birth, today))
    if draft.age is not None:
        return draft
    return replace(draft, age=services.random.int_between(services.min_age, services.max_age))


def generate_date_of_birth(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.date_of_birth is not None:
        return draft
    _require(draft, "age")
    max_date = minus_years(services.time_provider.current_date(), draft.age)
    min_date = minus_years(max_date, 1) + timedelta(days=1)
    return replace(
        draft,
        date_of_birth=services.random.random_date_between(min_date, max_date),
    )


def generate_company_email(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.company_email is not None:
        return draft
    _require(draft, "first_name", "last_name", "company")
    provider = CompanyEmailProvider(
        services.random, draft.first_name, draft.last_name, draft.company
    )
    return replace(draft, company_email=provider.get())


def generate_password(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.password is not None:
        return draft
    return replace(draft, password=services.random.random_alphanumeric(PASSWORD_LENGTH))


def generate_national_identity_card_number(
    draft: PersonDraft, services: GenerationServices
) -> PersonDraft:
    if draft.national_identity_card_number is not None:
        return draft
    return replace(
        draft,
        national_identity_card_number=services.identity_card_provider.get(),
    )


def generate_national_identification_number(
    draft: PersonDraft, services: GenerationServices
) -> PersonDraft:
    if draft.national_identification_number is not None:
        return draft
    _require(draft, "sex", "date_of_birth")
    provider = services.nin_factory.produce(draft.date_of_birth, draft.sex)
    return replace(draft, national_identification_number=provider.get())


def generate_passport_number(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.passport_number is not None:
        return draft
    return replace(draft, passport_number=services.passport_provider.get())


def generate_address(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.address is not None:
        return draft
    return replace(draft, address=services.address_provider.get())


def generate_job_title(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    if draft.job_title is not None:
        return draft
    return replace(draft, job_title=services.locale_data.random_value(JOB_TITLES))


GENERATION_STEPS: tuple[Step, ...] = (
    generate_sex,
    generate_company,
    generate_first_name,
    generate_middle_name,
    generate_last_name,
    generate_email,
    generate_username,
    generate_telephone_number,
    generate_age,
    generate_date_of_birth,
    generate_company_email,
    generate_password,
    generate_national_identity_card_number,
    generate_national_identification_number,
    generate_passport_number,
    generate_address,
    generate_job_title,
)


def run_pipeline(draft: PersonDraft, services: GenerationServices) -> PersonDraft:
    """Run every generation step in order and return the resolved draft."""
    for step in GENERATION_STEPS:
        draft = step(draft, services)
    return draft
