"""
Person property directives

A directive pre-sets one field of the draft before generation starts, so the
matching pipeline step is skipped. Directives are validated when they are
created or applied, never at generation time.

Example:
    >>> fairy.person(female(), min_age(21), telephone_format("+48 ### ### ###"))
"""

from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from idforge.config.settings import AGE_LIMIT
from idforge.core.person import Address, Company, PersonDraft, Sex
from idforge.core.pipeline import GenerationServices
from idforge.errors import InvalidDirectiveError


DRAFT_FIELDS = frozenset(f.name for f in fields(PersonDraft))

# Fields holding plain strings, settable through with_field()
STRING_FIELDS = frozenset({
    "telephone_number_format",
    "first_name",
    "middle_name",
    "last_name",
    "email",
    "username",
    "telephone_number",
    "password",
    "job_title",
    "company_email",
    "national_identity_card_number",
    "national_identification_number",
    "passport_number",
})


@dataclass(frozen=True)
class PersonProperty:
    """A named pre-generation override.

    Attributes:
        name: Draft field the directive targets
        resolve: Computes the field value; may draw from the random source
    """
    name: str
    resolve: Callable[[GenerationServices], Any]

    def apply(self, draft: PersonDraft, services: GenerationServices) -> PersonDraft:
        return replace(draft, **{self.name: self.resolve(services)})


def _constant(name: str, value: Any) -> PersonProperty:
    return PersonProperty(name=name, resolve=lambda services: value)


def _check_age(value: Any, what: str = "Age") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDirectiveError(f"{what} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= AGE_LIMIT:
        raise InvalidDirectiveError(f"{what} must be between 0 and {AGE_LIMIT}, got {value}")
    return value


def with_sex(sex: Any) -> PersonProperty:
    """Fix the sex. Accepts a Sex or its name/value ("MALE", "female")."""
    if isinstance(sex, str) and not isinstance(sex, Sex):
        sex = sex.lower()
    try:
        return _constant("sex", Sex(sex))
    except ValueError:
        raise InvalidDirectiveError(
            f"Unknown sex: {sex!r} (expected one of {[s.value for s in Sex]})"
        ) from None


def male() -> PersonProperty:
    return with_sex(Sex.MALE)


def female() -> PersonProperty:
    return with_sex(Sex.FEMALE)


def with_age(age: int) -> PersonProperty:
    return _constant("age", _check_age(age))


def age_between(low: int, high: int) -> PersonProperty:
    """Draw the age from [low, high] when the directive is applied."""
    _check_age(low, "Minimum age")
    _check_age(high, "Maximum age")
    if low > high:
        raise InvalidDirectiveError(f"Minimum age {low} exceeds maximum age {high}")
    return PersonProperty(name="age", resolve=lambda services: services.random.int_between(low, high))


def min_age(low: int) -> PersonProperty:
    """Draw the age from [low, configured max_age] when the directive is applied."""
    _check_age(low, "Minimum age")

    def resolve(services: GenerationServices) -> int:
        if low > services.max_age:
            raise InvalidDirectiveError(
                f"Minimum age {low} exceeds configured maximum age {services.max_age}"
            )
        return services.random.int_between(low, services.max_age)

    return PersonProperty(name="age", resolve=resolve)


def max_age(high: int) -> PersonProperty:
    """Draw the age from [configured min_age, high] when the directive is applied."""
    _check_age(high, "Maximum age")

    def resolve(services: GenerationServices) -> int:
        if high < services.min_age:
            raise InvalidDirectiveError(
                f"Maximum age {high} is below configured minimum age {services.min_age}"
            )
        return services.random.int_between(services.min_age, high)

    return PersonProperty(name="age", resolve=resolve)


def with_date_of_birth(date_of_birth: date) -> PersonProperty:
    """Fix the date of birth. The age is then always derived from it.

    A datetime is truncated to its date. The date must not lie after the
    current date and must be encodable by the locale's identification number.
    """
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()
    elif not isinstance(date_of_birth, date):
        raise InvalidDirectiveError(
            f"Date of birth must be a date, got {type(date_of_birth).__name__}"
        )

    def resolve(services: GenerationServices) -> date:
        today = services.time_provider.current_date()
        if date_of_birth > today:
            raise InvalidDirectiveError(f"Date of birth {date_of_birth} is after {today}")
        if not services.nin_factory.supports(date_of_birth):
            raise InvalidDirectiveError(
                f"Date of birth {date_of_birth} cannot be encoded in a "
                f"national identification number for locale {services.locale!r}"
            )
        return date_of_birth

    return PersonProperty(name="date_of_birth", resolve=resolve)


def telephone_format(number_format: str) -> PersonProperty:
    """Use this pattern for the telephone number; '#' becomes a digit."""
    return with_field("telephone_number_format", number_format)


def with_company(company: Company) -> PersonProperty:
    if not isinstance(company, Company):
        raise InvalidDirectiveError(f"Company must be a Company, got {type(company).__name__}")
    return _constant("company", company)


def with_address(address: Address) -> PersonProperty:
    if not isinstance(address, Address):
        raise InvalidDirectiveError(f"Address must be an Address, got {type(address).__name__}")
    return _constant("address", address)


def with_field(name: str, value: Any) -> PersonProperty:
    """Generic directive for any draft field.

    Raises:
        InvalidDirectiveError: If the field is unknown or the value has the wrong type
    """
    if name not in DRAFT_FIELDS:
        raise InvalidDirectiveError(f"Unknown person field: {name!r}")
    if name == "sex":
        return with_sex(value)
    if name == "age":
        return with_age(value)
    if name == "date_of_birth":
        return with_date_of_birth(value)
    if name == "company":
        return with_company(value)
    if name == "address":
        return with_address(value)

    if not isinstance(value, str):
        raise InvalidDirectiveError(
            f"Field {name!r} must be a string, got {type(value).__name__}"
        )
    # Only the middle name may legitimately be empty
    if not value and name != "middle_name":
        raise InvalidDirectiveError(f"Field {name!r} cannot be empty")
    return _constant(name, value)


class PersonOverrides(BaseModel):
    """Explicit override set for generate_person().

    Every field is optional; a set field is copied to the result unchanged
    (except age, which is recomputed when date_of_birth is also set).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sex: Optional[Sex] = Field(None, description="Sex of the person")
    age: Optional[int] = Field(None, ge=0, le=AGE_LIMIT, description="Age in whole years")
    date_of_birth: Optional[date] = Field(None, description="Date of birth")
    telephone_number_format: Optional[str] = Field(
        None, min_length=1, description="Telephone pattern, '#' is a digit"
    )
    first_name: Optional[str] = Field(None, min_length=1)
    middle_name: Optional[str] = None
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=1)
    telephone_number: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)
    job_title: Optional[str] = Field(None, min_length=1)
    company_email: Optional[str] = Field(None, min_length=1)
    national_identity_card_number: Optional[str] = Field(None, min_length=1)
    national_identification_number: Optional[str] = Field(None, min_length=1)
    passport_number: Optional[str] = Field(None, min_length=1)
    address: Optional[Address] = None
    company: Optional[Company] = None

    @field_validator("sex", mode="before")
    @classmethod
    def normalize_sex(cls, v: Any) -> Any:
        """Accept sex names in any case, as with_sex() does."""
        if isinstance(v, str) and not isinstance(v, Sex):
            return v.lower()
        return v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def truncate_datetime(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v.date()
        return v

    def to_directives(self) -> list[PersonProperty]:
        """Equivalent directive list, one per set field."""
        return [
            with_field(name, value)
            for name, value in self
            if value is not None
        ]
