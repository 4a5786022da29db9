"""
Person data model

PersonDraft is the partially filled record the generation pipeline evolves
step by step; Person is the frozen snapshot handed to the caller.
"""

from dataclasses import asdict, dataclass, fields
from datetime import date
from enum import Enum
from typing import Any, Optional


class Sex(str, Enum):
    """Sex of a generated person. The value is the corpus sub-key."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Address:
    """Postal address"""
    street: str
    street_number: str
    apartment_number: str
    postal_code: str
    city: str

    @property
    def address_line1(self) -> str:
        line = f"{self.street} {self.street_number}"
        if self.apartment_number:
            line += f" APT {self.apartment_number}"
        return line

    @property
    def address_line2(self) -> str:
        return f"{self.postal_code} {self.city}"

    def __str__(self) -> str:
        return f"{self.address_line1}\n{self.address_line2}"


@dataclass(frozen=True)
class Company:
    """Employer of a generated person"""
    name: str
    domain: str
    email: str
    vat_identification_number: str


@dataclass(frozen=True)
class PersonDraft:
    """Partially generated person.

    A field left as None is still to be generated. A field holding a value is
    final: generation steps never overwrite it, they return a new draft with
    one more field filled.
    """
    sex: Optional[Sex] = None
    age: Optional[int] = None
    date_of_birth: Optional[date] = None
    telephone_number_format: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    telephone_number: Optional[str] = None
    password: Optional[str] = None
    job_title: Optional[str] = None
    company_email: Optional[str] = None
    national_identity_card_number: Optional[str] = None
    national_identification_number: Optional[str] = None
    passport_number: Optional[str] = None
    address: Optional[Address] = None
    company: Optional[Company] = None

    def preset_fields(self) -> list[str]:
        """Names of the fields that already hold a value."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def freeze(self) -> "Person":
        """Build the immutable Person.

        Raises:
            ValueError: If any person field is still unset
        """
        values = {
            f.name: getattr(self, f.name)
            for f in fields(Person)
        }
        missing = [name for name, value in values.items() if value is None]
        if missing:
            raise ValueError(f"Cannot freeze draft, unresolved fields: {', '.join(missing)}")
        return Person(**values)


@dataclass(frozen=True)
class Person:
    """Fully generated synthetic person.

    Example:
        >>> person = fairy.person(male(), with_age(30))
        >>> person.is_male
        True
        >>> person.age
        30
    """
    first_name: str
    middle_name: str
    last_name: str
    address: Address
    email: str
    username: str
    password: str
    sex: Sex
    telephone_number: str
    date_of_birth: date
    age: int
    national_identity_card_number: str
    national_identification_number: str
    passport_number: str
    company: Company
    company_email: str
    job_title: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_male(self) -> bool:
        return self.sex is Sex.MALE

    @property
    def is_female(self) -> bool:
        return self.sex is Sex.FEMALE

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation (ISO dates, plain strings)."""
        data = asdict(self)
        data["sex"] = self.sex.value
        data["date_of_birth"] = self.date_of_birth.isoformat()
        return data

    def __repr__(self) -> str:
        return f"Person({self.full_name}, {self.sex.value}, {self.age})"
