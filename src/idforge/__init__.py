"""
idforge: synthetic identity generator

Produces internally consistent fake person records (names, contact details,
company, address, national identifiers) under optional constraints.
"""

__version__ = "0.3.0"

from idforge.core import (
    Address,
    Company,
    Fairy,
    Person,
    PersonAssembler,
    PersonOverrides,
    Sex,
    create_fairy,
    generate_person,
    get_fairy,
)
from idforge.errors import (
    DataConfigurationError,
    IdForgeError,
    InvalidDirectiveError,
    PipelineOrderError,
)

__all__ = [
    "Address",
    "Company",
    "Fairy",
    "Person",
    "PersonAssembler",
    "PersonOverrides",
    "Sex",
    "create_fairy",
    "generate_person",
    "get_fairy",
    "DataConfigurationError",
    "IdForgeError",
    "InvalidDirectiveError",
    "PipelineOrderError",
]
