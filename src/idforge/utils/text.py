"""Text processing utility functions."""

import re
import unicodedata


# Letters that carry a stroke rather than a combining mark, so NFD leaves them intact
_STROKE_LETTERS = str.maketrans({"ł": "l", "Ł": "L", "ø": "o", "Ø": "O", "đ": "d", "Đ": "D"})

_NON_IDENTIFIER = re.compile(r"[^a-z0-9]")


def strip_accents(text: str) -> str:
    """Remove diacritics from text.

    Decomposes the text (Unicode NFD), drops combining marks and maps the
    stroke letters that have no decomposition.

    Args:
        text: Input text.

    Returns:
        Text with accents removed. Case is preserved.

    Examples:
        >>> strip_accents("Łukasz Wójcik")
        'Lukasz Wojcik'
        >>> strip_accents("Zoë")
        'Zoe'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return stripped.translate(_STROKE_LETTERS)


def to_identifier(text: str) -> str:
    """Fold text into a lower-case ASCII token usable in user names and domains.

    Args:
        text: Input text, for example a name or company name.

    Returns:
        Lower-case alphanumeric token.

    Examples:
        >>> to_identifier("Müller & Söhne")
        'mullersohne'
    """
    return _NON_IDENTIFIER.sub("", strip_accents(text).lower())
