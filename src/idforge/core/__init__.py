"""
Person generation core

Main components:
- PersonAssembler: ordered field-generation pipeline with overrides
- PersonDraft / Person: partially generated and frozen person records
- RandomPrimitives: seedable random draws
- LocaleData: corpus lookups
- Fairy: facade wiring a locale's services
"""

from idforge.core.assembler import PersonAssembler, generate_person
from idforge.core.fairy import Fairy, build_services, create_fairy, get_fairy
from idforge.core.locale_data import LocaleData
from idforge.core.person import Address, Company, Person, PersonDraft, Sex
from idforge.core.pipeline import GENERATION_STEPS, GenerationServices, run_pipeline
from idforge.core.properties import (
    PersonOverrides,
    PersonProperty,
    age_between,
    female,
    male,
    max_age,
    min_age,
    telephone_format,
    with_address,
    with_age,
    with_company,
    with_date_of_birth,
    with_field,
    with_sex,
)
from idforge.core.random_primitives import RandomPrimitives
from idforge.core.time_provider import FixedTimeProvider, TimeProvider

__all__ = [
    "PersonAssembler",
    "generate_person",
    "Fairy",
    "build_services",
    "create_fairy",
    "get_fairy",
    "LocaleData",
    "Address",
    "Company",
    "Person",
    "PersonDraft",
    "Sex",
    "GENERATION_STEPS",
    "GenerationServices",
    "run_pipeline",
    "PersonOverrides",
    "PersonProperty",
    "age_between",
    "female",
    "male",
    "max_age",
    "min_age",
    "telephone_format",
    "with_address",
    "with_age",
    "with_company",
    "with_date_of_birth",
    "with_field",
    "with_sex",
    "RandomPrimitives",
    "FixedTimeProvider",
    "TimeProvider",
]
