"""
Email providers

Compose plausible personal and company email addresses from a person's names.

Personal local-part shapes:
- first.last      (john.smith)
- firstlast       (johnsmith)
- initial_last    (jsmith)

Names without any ASCII letters or digits (for example "张伟") fold to an
empty token; a random lower-case token of FALLBACK_TOKEN_LENGTH letters is
used in their place.
"""

from idforge.core.locale_data import PERSONAL_EMAIL_DOMAINS, LocaleData
from idforge.core.person import Company
from idforge.core.random_primitives import RandomPrimitives
from idforge.utils.text import to_identifier


LOCAL_PART_PATTERNS = [
    "first.last",
    "firstlast",
    "initial_last",
]

FALLBACK_TOKEN_LENGTH = 6


def name_token(random: RandomPrimitives, name: str) -> str:
    """Lower-case ASCII token for a name, drawn at random if nothing survives folding."""
    return to_identifier(name) or random.random_letters(FALLBACK_TOKEN_LENGTH).lower()


class EmailProvider:
    """Personal email address for one person.

    Example:
        >>> EmailProvider(locale_data, random, "Łukasz", "Wójcik").get()
        'lukasz.wojcik@wp.pl'
    """

    def __init__(
        self,
        locale_data: LocaleData,
        random: RandomPrimitives,
        first_name: str,
        last_name: str,
    ):
        self.locale_data = locale_data
        self.random = random
        self.first_name = first_name
        self.last_name = last_name

    def get(self) -> str:
        pattern = self.random.random_element(LOCAL_PART_PATTERNS)
        local_part = self._local_part(pattern)
        domain = self.locale_data.random_value(PERSONAL_EMAIL_DOMAINS)
        return f"{local_part}@{domain}"

    def _local_part(self, pattern: str) -> str:
        first = name_token(self.random, self.first_name)
        last = name_token(self.random, self.last_name)

        if pattern == "first.last":
            return f"{first}.{last}"
        elif pattern == "firstlast":
            return f"{first}{last}"
        else:  # initial_last
            return f"{first[:1]}{last}"


class CompanyEmailProvider:
    """Work email address at the person's company: first.last@<company domain>."""

    def __init__(
        self,
        random: RandomPrimitives,
        first_name: str,
        last_name: str,
        company: Company,
    ):
        self.random = random
        self.first_name = first_name
        self.last_name = last_name
        self.company = company

    def get(self) -> str:
        first = name_token(self.random, self.first_name)
        last = name_token(self.random, self.last_name)
        return f"{first}.{last}@{self.company.domain}"
