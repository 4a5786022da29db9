"""Runtime settings for idforge.

Settings come from explicit arguments or from environment variables:

    IDFORGE_LOCALE      Locale of the bundled corpus (default: en)
    IDFORGE_SEED        Integer seed for reproducible output (default: unset)
    IDFORGE_MIN_AGE     Lower bound for randomly drawn ages (default: 1)
    IDFORGE_MAX_AGE     Upper bound for randomly drawn ages (default: 100)
    IDFORGE_DATA_PATH   YAML file overlaying the bundled corpus (default: unset)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


MIN_AGE = 1
MAX_AGE = 100

# Hard limit for any age accepted by directives or settings
AGE_LIMIT = 150


@dataclass(frozen=True)
class IdForgeSettings:
    """Settings for a person generator.

    Attributes:
        locale: Locale of the bundled corpus (e.g., "en", "pl").
        seed: Seed for the random source. None draws a fresh seed.
        min_age: Lower bound (inclusive) for randomly drawn ages.
        max_age: Upper bound (inclusive) for randomly drawn ages.
        data_path: Optional YAML file whose categories overlay the bundled corpus.
    """

    locale: str = "en"
    seed: Optional[int] = None
    min_age: int = MIN_AGE
    max_age: int = MAX_AGE
    data_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.locale:
            raise ValueError("Locale cannot be empty")
        if not 0 <= self.min_age <= AGE_LIMIT:
            raise ValueError(f"min_age must be between 0 and {AGE_LIMIT}, got {self.min_age}")
        if not 0 <= self.max_age <= AGE_LIMIT:
            raise ValueError(f"max_age must be between 0 and {AGE_LIMIT}, got {self.max_age}")
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            )

    @classmethod
    def from_env(cls) -> "IdForgeSettings":
        """Build settings from IDFORGE_* environment variables.

        Returns:
            IdForgeSettings populated from the environment.

        Raises:
            ValueError: If a variable holds a malformed value.
        """
        data_path = os.getenv("IDFORGE_DATA_PATH")
        return cls(
            locale=os.getenv("IDFORGE_LOCALE", "en").strip().lower(),
            seed=_int_from_env("IDFORGE_SEED", None),
            min_age=_int_from_env("IDFORGE_MIN_AGE", MIN_AGE),
            max_age=_int_from_env("IDFORGE_MAX_AGE", MAX_AGE),
            data_path=Path(data_path) if data_path else None,
        )


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
