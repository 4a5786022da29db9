"""Configuration module for idforge."""

from idforge.config.locale_loader import (
    SUPPORTED_LOCALES,
    load_locale_corpus,
    load_corpus_from_yaml,
)
from idforge.config.settings import IdForgeSettings

__all__ = [
    "IdForgeSettings",
    "SUPPORTED_LOCALES",
    "load_corpus_from_yaml",
    "load_locale_corpus",
]
