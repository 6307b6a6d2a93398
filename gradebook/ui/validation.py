"""
Input validators.

Pure functions that check one line of user input and return either
``Ok(parsed_value)`` or ``Invalid(message)``. They never print and never
read input; InputPrompter does both and re-asks on ``Invalid``.
"""

import re
from datetime import date, datetime
from typing import Optional

from ..config import (
    NAME_PATTERN,
    SAFE_TEXT_PATTERN,
    STUDENT_ID_PATTERN,
    WEB_PAGE_PATTERN,
    DATE_INPUT_FORMATS,
    LETTER_GRADES,
    YES_ANSWERS,
    NO_ANSWERS,
    ERR_EMPTY,
    ERR_INVALID_NAME,
    ERR_INVALID_TEXT,
    ERR_INVALID_ID,
    ERR_INVALID_WEB,
    ERR_INVALID_NUMBER,
    ERR_NOT_POSITIVE,
    ERR_DATE_FMT,
    ERR_FUTURE_DATE,
    ERR_INVALID_GRADE,
    ERR_INVALID_ANSWER,
)
from ..models import Ok, Invalid, ValidationResult

_INTEGER = re.compile(r"[+-]?\d+")


def validate_safe_text(text: str) -> ValidationResult:
    """Letters, digits and spaces."""
    text = text.strip()
    if not text:
        return Invalid(ERR_EMPTY)
    if re.fullmatch(SAFE_TEXT_PATTERN, text):
        return Ok(text)
    return Invalid(ERR_INVALID_TEXT)


def validate_name(text: str) -> ValidationResult:
    """Letters and spaces only; no digits or symbols."""
    text = text.strip()
    if not text:
        return Invalid(ERR_EMPTY)
    if re.fullmatch(NAME_PATTERN, text):
        return Ok(text)
    return Invalid(ERR_INVALID_NAME)


def validate_student_id(text: str) -> ValidationResult:
    """
    Letters and digits, returned unchanged as a string.

    "007" stays "007"; IDs are never converted to numbers.
    """
    text = text.strip()
    if not text:
        return Invalid(ERR_EMPTY)
    if re.fullmatch(STUDENT_ID_PATTERN, text):
        return Ok(text)
    return Invalid(ERR_INVALID_ID)


def validate_web_page(text: str) -> ValidationResult:
    """Accepts forms like 'cs.edu', 'www.duzce.edu.tr' and 'http://site.net'."""
    text = text.strip()
    if not text:
        return Invalid(ERR_EMPTY)
    if re.match(WEB_PAGE_PATTERN, text):
        return Ok(text)
    return Invalid(ERR_INVALID_WEB)


def validate_positive_int(text: str) -> ValidationResult:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return Invalid(ERR_INVALID_NUMBER)
    value = int(text)
    if value <= 0:
        return Invalid(ERR_NOT_POSITIVE)
    return Ok(value)


def validate_date(text: str, today: Optional[date] = None) -> ValidationResult:
    """
    Parse a past (or today's) date.

    Accepted formats: dd.mm.yyyy, dd/mm/yyyy, dd-mm-yyyy.
    """
    text = text.strip()
    if not text:
        return Invalid(ERR_EMPTY)

    parsed = None
    for fmt in DATE_INPUT_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt).date()
            break
        except ValueError:
            continue

    if parsed is None:
        return Invalid(ERR_DATE_FMT)

    if parsed > (today or date.today()):
        return Invalid(ERR_FUTURE_DATE)

    return Ok(parsed)


def parse_letter_grade(text: str) -> ValidationResult:
    """Map a letter grade (any case) to its grade points."""
    points = LETTER_GRADES.get(text.strip().upper())
    if points is None:
        return Invalid(ERR_INVALID_GRADE)
    return Ok(points)


def parse_confirmation(text: str) -> ValidationResult:
    answer = text.strip().lower()
    if answer in YES_ANSWERS:
        return Ok(True)
    if answer in NO_ANSWERS:
        return Ok(False)
    return Invalid(ERR_INVALID_ANSWER)
