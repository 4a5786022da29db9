"""
Sub-record providers

Each provider returns a fresh random value per get() call and holds no state
beyond its collaborators.
"""

from idforge.core.providers.address import AddressProvider
from idforge.core.providers.company import CompanyProvider, NipProvider, VatNumberProvider
from idforge.core.providers.email import CompanyEmailProvider, EmailProvider
from idforge.core.providers.identity import (
    PassportNumberProvider,
    PatternIdentityCardNumberProvider,
    PolishIdentityCardNumberProvider,
)
from idforge.core.providers.national_id import (
    PeselFactory,
    PeselProvider,
    SsnFactory,
    SsnProvider,
)

__all__ = [
    "AddressProvider",
    "CompanyProvider",
    "NipProvider",
    "VatNumberProvider",
    "EmailProvider",
    "CompanyEmailProvider",
    "PassportNumberProvider",
    "PatternIdentityCardNumberProvider",
    "PolishIdentityCardNumberProvider",
    "PeselFactory",
    "PeselProvider",
    "SsnFactory",
    "SsnProvider",
]
