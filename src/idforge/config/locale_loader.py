"""YAML loader for locale corpora.

A corpus maps category names either to a list of strings or to a mapping of
sub-keys (such as sex) to lists of strings:

    first_names:
      male: [James, John]
      female: [Mary, Patricia]
    job_titles:
      - Accountant
      - Software Engineer

The bundled corpora live in ``idforge/data/<locale>.yaml``. An extra YAML file
may overlay them; its categories replace the bundled ones of the same name.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from idforge.errors import DataConfigurationError
from idforge.logging import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

SUPPORTED_LOCALES = ("en", "pl")

CorpusEntry = Union[tuple[str, ...], dict[str, tuple[str, ...]]]
Corpus = dict[str, CorpusEntry]


def load_corpus_from_yaml(path: Union[Path, str]) -> Corpus:
    """Load a corpus from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping of category to a tuple of values or to a mapping of
        sub-key to a tuple of values.

    Raises:
        DataConfigurationError: If the file is missing, malformed, or a
            category has an unsupported shape.
    """
    path = Path(path)

    if not path.exists():
        raise DataConfigurationError(f"Corpus file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataConfigurationError(f"YAML parsing error in {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise DataConfigurationError(
            f"Invalid corpus structure in {path}: expected dict, got {type(data).__name__}"
        )

    corpus: Corpus = {}
    for category, entry in data.items():
        corpus[str(category)] = _parse_entry(path, str(category), entry)

    return corpus


def load_locale_corpus(locale: str, overlay_path: Optional[Union[Path, str]] = None) -> Corpus:
    """Load the bundled corpus of a locale, optionally overlaid by a custom file.

    Args:
        locale: Locale code, one of SUPPORTED_LOCALES.
        overlay_path: Optional YAML file whose categories replace bundled ones.

    Returns:
        The merged corpus.

    Raises:
        DataConfigurationError: If the locale is unsupported or a file is invalid.
    """
    if locale not in SUPPORTED_LOCALES:
        raise DataConfigurationError(
            f"Unsupported locale: {locale!r} (supported: {', '.join(SUPPORTED_LOCALES)})"
        )

    corpus = load_corpus_from_yaml(DATA_DIR / f"{locale}.yaml")

    if overlay_path is not None:
        overlay = load_corpus_from_yaml(overlay_path)
        corpus.update(overlay)
        logger.debug(
            "Applied corpus overlay",
            extra={"locale": locale, "overlay_categories": sorted(overlay)},
        )

    logger.debug("Loaded locale corpus", extra={"locale": locale, "categories": len(corpus)})
    return corpus


def _parse_entry(path: Path, category: str, entry: object) -> CorpusEntry:
    if isinstance(entry, list):
        return _parse_values(path, category, entry)

    if isinstance(entry, dict):
        return {
            str(sub_key): _parse_values(path, f"{category}.{sub_key}", values)
            for sub_key, values in entry.items()
        }

    raise DataConfigurationError(
        f"Category {category!r} in {path} must be a list or a mapping, "
        f"got {type(entry).__name__}"
    )


def _parse_values(path: Path, name: str, values: object) -> tuple[str, ...]:
    if not isinstance(values, list):
        raise DataConfigurationError(
            f"Category {name!r} in {path} must be a list, got {type(values).__name__}"
        )
    return tuple(str(v) for v in values)
