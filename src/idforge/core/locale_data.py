"""
Locale data

Read-only corpus service for one locale: names keyed by sex, job titles and
the format lists the sub-record providers draw from.
"""

from typing import Optional

from idforge.config.locale_loader import Corpus
from idforge.core.random_primitives import RandomPrimitives
from idforge.errors import DataConfigurationError

# Category names used across the generators
FIRST_NAMES = "first_names"
LAST_NAMES = "last_names"
TELEPHONE_NUMBER_FORMATS = "telephone_number_formats"
JOB_TITLES = "job_titles"
PERSONAL_EMAIL_DOMAINS = "personal_email_domains"
COMPANY_NAMES = "company_names"
COMPANY_SUFFIXES = "company_suffixes"
COMPANY_EMAIL_PREFIXES = "company_email_prefixes"
DOMAIN_SUFFIXES = "domain_suffixes"
STREETS = "streets"
CITIES = "cities"
POSTAL_CODE_FORMATS = "postal_code_formats"
PASSPORT_NUMBER_FORMATS = "passport_number_formats"
IDENTITY_CARD_FORMATS = "identity_card_formats"
VAT_FORMATS = "vat_formats"


class LocaleData:
    """Corpus lookups with random draws.

    Lookups that find no entries fail with DataConfigurationError instead of
    returning an empty value.

    Example:
        >>> data = LocaleData("en", corpus, RandomPrimitives(seed=1))
        >>> data.values_of_type("first_names", "female")
        'Linda'
    """

    def __init__(self, locale: str, corpus: Corpus, random: RandomPrimitives):
        """Initialize the corpus service.

        Args:
            locale: Locale code the corpus belongs to
            corpus: Parsed corpus (see idforge.config.locale_loader)
            random: Random source used for draws
        """
        self.locale = locale
        self._corpus = dict(corpus)
        self._random = random

    @property
    def categories(self) -> list[str]:
        return sorted(self._corpus)

    def has_category(self, category: str) -> bool:
        return category in self._corpus

    def values_of_type(self, category: str, sub_key: Optional[str] = None) -> str:
        """Draw one value from a category, optionally narrowed by a sub-key.

        Args:
            category: Corpus category (e.g., "first_names")
            sub_key: Sub-key inside a keyed category (e.g., "male")

        Returns:
            A randomly chosen value

        Raises:
            DataConfigurationError: If the category or sub-key has no entries
        """
        if sub_key is None:
            return self.random_value(category)

        entry = self._get(category)
        if not isinstance(entry, dict):
            raise DataConfigurationError(
                f"Category {category!r} is not keyed, cannot look up {sub_key!r} "
                f"(locale {self.locale!r})"
            )
        values = entry.get(sub_key)
        if not values:
            raise DataConfigurationError(
                f"No values for {category!r} with key {sub_key!r} (locale {self.locale!r})"
            )
        return self._random.random_element(values)

    def random_value(self, category: str) -> str:
        """Draw one value from a plain list category.

        Raises:
            DataConfigurationError: If the category is missing, keyed, or empty
        """
        entry = self._get(category)
        if isinstance(entry, dict):
            raise DataConfigurationError(
                f"Category {category!r} is keyed by {sorted(entry)}, a key is required "
                f"(locale {self.locale!r})"
            )
        if not entry:
            raise DataConfigurationError(
                f"No values for {category!r} (locale {self.locale!r})"
            )
        return self._random.random_element(entry)

    def _get(self, category: str):
        try:
            return self._corpus[category]
        except KeyError:
            raise DataConfigurationError(
                f"No such category: {category!r} (locale {self.locale!r})"
            ) from None
