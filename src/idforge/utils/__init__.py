"""Utility functions and validators."""

# Text processing utilities
from idforge.utils.text import (
    strip_accents,
    to_identifier,
)

# Validation utilities
from idforge.utils.validators import (
    nip_checksum,
    pesel_checksum,
    polish_id_card_checksum,
    validate_email,
    validate_nip,
    validate_pesel,
    validate_polish_id_card,
    validate_ssn,
)

__all__ = [
    # Text processing
    "strip_accents",
    "to_identifier",
    # Validation
    "validate_email",
    "validate_pesel",
    "validate_polish_id_card",
    "validate_nip",
    "validate_ssn",
    "pesel_checksum",
    "polish_id_card_checksum",
    "nip_checksum",
]
