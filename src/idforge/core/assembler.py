"""
Person assembler

Applies property directives to a preset draft, then runs the generation
pipeline and freezes the result into an immutable Person.

Note: the preset survives across generate() calls. An assembler built with
with_age(30) yields a 30-year-old every time, and a preset drawn by
min_age() is drawn once, at construction. Build a new assembler (or call
generate_person()) for each independent set of constraints.
"""

from datetime import date
from typing import Optional

from idforge.core.person import Address, Company, Person, PersonDraft, Sex
from idforge.core.pipeline import GenerationServices, run_pipeline
from idforge.core.properties import (
    PersonOverrides,
    PersonProperty,
    telephone_format,
    with_address,
    with_age,
    with_company,
    with_date_of_birth,
    with_field,
    with_sex,
)
from idforge.logging import generation_context, get_logger

logger = get_logger(__name__)


class PersonAssembler:
    """Builds synthetic persons from a fixed pipeline and pre-set overrides.

    Example:
        >>> assembler = PersonAssembler(services, male(), with_age(30))
        >>> person = assembler.generate()
        >>> person.sex, person.age
        (<Sex.MALE: 'male'>, 30)
    """

    def __init__(self, services: GenerationServices, *directives: PersonProperty):
        """Initialize the assembler and apply directives in order.

        Args:
            services: Collaborators used for generation
            *directives: Overrides applied before any generation runs

        Raises:
            InvalidDirectiveError: If a directive cannot be applied
        """
        self.services = services
        self._preset = PersonDraft()
        for directive in directives:
            self.apply(directive)

    @property
    def preset(self) -> PersonDraft:
        return self._preset

    def apply(self, directive: PersonProperty) -> None:
        """Apply one directive to the preset. Later directives win."""
        self._preset = directive.apply(self._preset, self.services)

    def generate(self) -> Person:
        """Generate one person from the preset.

        Returns:
            Frozen Person with every field resolved

        Raises:
            DataConfigurationError: If a corpus lookup finds no entries
        """
        with generation_context():
            draft = run_pipeline(self._preset, self.services)
            logger.debug(
                "Generated person",
                extra={
                    "locale": self.services.locale,
                    "preset_fields": self._preset.preset_fields(),
                },
            )
            return draft.freeze()

    def set_sex(self, sex: Sex) -> None:
        self.apply(with_sex(sex))

    def set_age(self, age: int) -> None:
        self.apply(with_age(age))

    def set_date_of_birth(self, date_of_birth: date) -> None:
        self.apply(with_date_of_birth(date_of_birth))

    def set_telephone_number_format(self, number_format: str) -> None:
        self.apply(telephone_format(number_format))

    def set_company(self, company: Company) -> None:
        self.apply(with_company(company))

    def set_address(self, address: Address) -> None:
        self.apply(with_address(address))

    def set_first_name(self, first_name: str) -> None:
        self.apply(with_field("first_name", first_name))

    def set_middle_name(self, middle_name: str) -> None:
        self.apply(with_field("middle_name", middle_name))

    def set_last_name(self, last_name: str) -> None:
        self.apply(with_field("last_name", last_name))

    def set_email(self, email: str) -> None:
        self.apply(with_field("email", email))

    def set_username(self, username: str) -> None:
        self.apply(with_field("username", username))

    def set_telephone_number(self, telephone_number: str) -> None:
        self.apply(with_field("telephone_number", telephone_number))

    def set_password(self, password: str) -> None:
        self.apply(with_field("password", password))

    def set_job_title(self, job_title: str) -> None:
        self.apply(with_field("job_title", job_title))

    def set_company_email(self, company_email: str) -> None:
        self.apply(with_field("company_email", company_email))

    def set_national_identity_card_number(self, number: str) -> None:
        self.apply(with_field("national_identity_card_number", number))

    def set_national_identification_number(self, number: str) -> None:
        self.apply(with_field("national_identification_number", number))

    def set_passport_number(self, passport_number: str) -> None:
        self.apply(with_field("passport_number", passport_number))


def generate_person(
    services: GenerationServices,
    overrides: Optional[PersonOverrides] = None,
) -> Person:
    """Generate one person from an explicit override set.

    Nothing is retained between calls: each call builds its own preset.

    Args:
        services: Collaborators used for generation
        overrides: Fields to pre-set; None generates everything

    Returns:
        Frozen Person
    """
    directives = overrides.to_directives() if overrides is not None else []
    return PersonAssembler(services, *directives).generate()
