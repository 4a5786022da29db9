"""
Fairy facade

Wires the random source, the locale corpus and the locale's sub-record
providers into GenerationServices and exposes a compact generation interface.
"""

from pathlib import Path
from typing import Optional, Union

from idforge.config.locale_loader import load_locale_corpus
from idforge.config.settings import IdForgeSettings
from idforge.core.assembler import PersonAssembler, generate_person
from idforge.core.locale_data import LocaleData
from idforge.core.person import Address, Company, Person
from idforge.core.pipeline import GenerationServices
from idforge.core.properties import PersonOverrides, PersonProperty
from idforge.core.providers import (
    AddressProvider,
    CompanyProvider,
    NipProvider,
    PassportNumberProvider,
    PatternIdentityCardNumberProvider,
    PeselFactory,
    PolishIdentityCardNumberProvider,
    SsnFactory,
    VatNumberProvider,
)
from idforge.core.random_primitives import RandomPrimitives
from idforge.core.time_provider import TimeProvider
from idforge.logging import get_logger

logger = get_logger(__name__)


def build_services(
    settings: IdForgeSettings,
    *,
    time_provider: Optional[TimeProvider] = None,
) -> GenerationServices:
    """Create the collaborators for one locale.

    Args:
        settings: Locale, seed, age bounds and corpus overlay
        time_provider: Current-date source (defaults to the system date)

    Returns:
        GenerationServices ready for the pipeline

    Raises:
        DataConfigurationError: If the locale or corpus is invalid
    """
    corpus = load_locale_corpus(settings.locale, settings.data_path)
    random = RandomPrimitives(seed=settings.seed)
    locale_data = LocaleData(settings.locale, corpus, random)

    if settings.locale == "pl":
        vat_provider = NipProvider(random)
        identity_card_provider = PolishIdentityCardNumberProvider(random)
        nin_factory = PeselFactory(random)
    else:
        vat_provider = VatNumberProvider(locale_data, random)
        identity_card_provider = PatternIdentityCardNumberProvider(locale_data, random)
        nin_factory = SsnFactory(random)

    return GenerationServices(
        locale=settings.locale,
        random=random,
        locale_data=locale_data,
        time_provider=time_provider or TimeProvider(),
        company_provider=CompanyProvider(locale_data, random, vat_provider),
        address_provider=AddressProvider(locale_data, random),
        identity_card_provider=identity_card_provider,
        passport_provider=PassportNumberProvider(locale_data, random),
        nin_factory=nin_factory,
        min_age=settings.min_age,
        max_age=settings.max_age,
    )


class Fairy:
    """Entry point for generating synthetic persons.

    Example:
        >>> fairy = Fairy.create(locale="pl", seed=42)
        >>> person = fairy.person(female(), with_age(35))
        >>> len(person.national_identification_number)
        11
    """

    def __init__(self, services: GenerationServices):
        self.services = services

    @classmethod
    def create(
        cls,
        locale: Optional[str] = None,
        seed: Optional[int] = None,
        *,
        settings: Optional[IdForgeSettings] = None,
        data_path: Optional[Union[Path, str]] = None,
        time_provider: Optional[TimeProvider] = None,
    ) -> "Fairy":
        """Build a Fairy for a locale.

        Explicit arguments take precedence over the values in settings.

        Args:
            locale: Locale code (e.g., "en", "pl")
            seed: Seed for reproducible output
            settings: Base settings; defaults to IdForgeSettings()
            data_path: YAML file overlaying the bundled corpus
            time_provider: Current-date source
        """
        base = settings or IdForgeSettings()
        settings = IdForgeSettings(
            locale=locale or base.locale,
            seed=seed if seed is not None else base.seed,
            min_age=base.min_age,
            max_age=base.max_age,
            data_path=Path(data_path) if data_path is not None else base.data_path,
        )
        logger.debug("Creating fairy", extra={"locale": settings.locale, "seeded": settings.seed is not None})
        return cls(build_services(settings, time_provider=time_provider))

    @property
    def locale(self) -> str:
        return self.services.locale

    def person(self, *directives: PersonProperty) -> Person:
        """Generate one person honoring the given directives."""
        return PersonAssembler(self.services, *directives).generate()

    def person_assembler(self, *directives: PersonProperty) -> PersonAssembler:
        """Assembler with the directives applied, for setter-based configuration."""
        return PersonAssembler(self.services, *directives)

    def person_from(self, overrides: Optional[PersonOverrides] = None) -> Person:
        """Generate one person from an explicit override set."""
        return generate_person(self.services, overrides)

    def company(self) -> Company:
        return self.services.company_provider.get()

    def address(self) -> Address:
        return self.services.address_provider.get()


# Process-wide default instance
_default_fairy: Optional[Fairy] = None


def get_fairy() -> Fairy:
    """Get the process-wide Fairy built from IDFORGE_* environment settings.

    All callers share one random source. Use create_fairy() for an
    independent instance.
    """
    global _default_fairy

    if _default_fairy is None:
        _default_fairy = Fairy.create(settings=IdForgeSettings.from_env())

    return _default_fairy


def create_fairy(
    locale: Optional[str] = None,
    seed: Optional[int] = None,
    **kwargs,
) -> Fairy:
    """Create an independent Fairy with its own random source.

    Args:
        locale: Locale code
        seed: Seed for reproducible output
        **kwargs: Passed through to Fairy.create()
    """
    return Fairy.create(locale, seed, **kwargs)
