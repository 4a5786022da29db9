"""Validation utility functions for generated identifiers."""

import re


_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
    re.IGNORECASE,
)
_PESEL_PATTERN = re.compile(r"^\d{11}$")
_POLISH_ID_CARD_PATTERN = re.compile(r"^[A-Z]{3}\d{6}$")
_NIP_PATTERN = re.compile(r"^\d{10}$")
_SSN_PATTERN = re.compile(r"^(\d{3})-(\d{2})-(\d{4})$")

PESEL_WEIGHTS = [1, 3, 7, 9, 1, 3, 7, 9, 1, 3]
POLISH_ID_CARD_WEIGHTS = [7, 3, 1, 9, 7, 3, 1, 7, 3]
NIP_WEIGHTS = [6, 5, 7, 2, 3, 4, 5, 6, 7]


def pesel_checksum(prefix10: str) -> int:
    """Compute the PESEL control digit.

    Args:
        prefix10: First ten digits of the PESEL.

    Returns:
        Control digit (0-9).
    """
    total = sum(int(d) * w for d, w in zip(prefix10, PESEL_WEIGHTS))
    return (10 - total % 10) % 10


def polish_id_card_checksum(series: str, number: str) -> int:
    """Compute the check digit of a Polish identity card number.

    The check digit sits between the three-letter series and the five-digit
    number and carries weight 9, so it equals the weighted sum of the other
    characters modulo 10. Letters count as A=10 ... Z=35.

    Args:
        series: Three upper-case letters.
        number: Five digits following the check digit.

    Returns:
        Check digit (0-9).
    """
    chars = series + "0" + number
    total = 0
    for i, c in enumerate(chars):
        if i == 3:
            continue
        total += _char_value(c) * POLISH_ID_CARD_WEIGHTS[i]
    return total % 10


def nip_checksum(prefix9: str) -> int:
    """Compute the NIP (Polish tax id) control digit.

    Args:
        prefix9: First nine digits of the NIP.

    Returns:
        Control value 0-10. A value of 10 means the prefix cannot form a valid NIP.
    """
    return sum(int(d) * w for d, w in zip(prefix9, NIP_WEIGHTS)) % 11


def _char_value(c: str) -> int:
    if c.isdigit():
        return int(c)
    return ord(c) - ord("A") + 10


def validate_email(email: str) -> bool:
    """Validate an email address.

    Args:
        email: Email address to validate.

    Returns:
        True if the email is valid, False otherwise.

    Examples:
        >>> validate_email("jan.kowalski@example.com")
        True
        >>> validate_email("invalid.email")
        False
    """
    if not email or not isinstance(email, str):
        return False
    return bool(_EMAIL_PATTERN.match(email.strip()))


def validate_pesel(pesel: str) -> bool:
    """Validate a PESEL number (format and control digit).

    Examples:
        >>> validate_pesel("44051401359")
        True
        >>> validate_pesel("44051401358")
        False
    """
    if not pesel or not _PESEL_PATTERN.match(pesel):
        return False
    return pesel_checksum(pesel[:10]) == int(pesel[10])


def validate_polish_id_card(number: str) -> bool:
    """Validate a Polish identity card number (format and check digit).

    Examples:
        >>> validate_polish_id_card("ABA300000")
        True
    """
    if not number or not _POLISH_ID_CARD_PATTERN.match(number):
        return False
    return polish_id_card_checksum(number[:3], number[4:]) == int(number[3])


def validate_nip(nip: str) -> bool:
    """Validate a NIP (format and control digit)."""
    if not nip or not _NIP_PATTERN.match(nip):
        return False
    control = nip_checksum(nip[:9])
    return control != 10 and control == int(nip[9])


def validate_ssn(ssn: str) -> bool:
    """Validate the shape of a US Social Security Number.

    Area 000, 666 and 900-999, group 00 and serial 0000 are never issued.

    Examples:
        >>> validate_ssn("123-45-6789")
        True
        >>> validate_ssn("666-12-3456")
        False
    """
    if not ssn:
        return False
    match = _SSN_PATTERN.match(ssn)
    if not match:
        return False
    area, group, serial = (int(part) for part in match.groups())
    if area == 0 or area == 666 or area >= 900:
        return False
    return group != 0 and serial != 0
