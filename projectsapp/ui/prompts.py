"""Line-based console input helpers."""

from decimal import Decimal, InvalidOperation

from projectsapp.exc import ValidationError
from projectsapp.models.project import MAX_DIFFICULTY, MIN_DIFFICULTY
from projectsapp.utils import HOURS_LIMIT, to_hours


def get_string_input(prompt: str) -> str | None:
    """
    Print ``prompt`` and read one line from the console.

    Args:
        prompt: The prompt to print, without the trailing colon

    Returns:
        The trimmed input, or None if the user entered nothing

    """
    text = input(f"{prompt}: ")
    return text.strip() or None


def parse_int(text: str | None) -> int | None:
    """
    Convert console input to an integer.

    Args:
        text: The raw input

    Raises:
        ValidationError: ``text`` is not a whole number

    Returns:
        The integer, or None for blank input

    """
    if text is None or not text.strip():
        return None
    try:
        return int(text.strip())
    except ValueError:
        msg = f"{text.strip()} is not a valid number."
        raise ValidationError(text, msg) from None


def parse_decimal(text: str | None) -> Decimal | None:
    """
    Convert console input to a number of hours with two decimal places.

    Args:
        text: The raw input

    Raises:
        ValidationError: ``text`` is not a decimal number below 100000

    Returns:
        The rounded :class:`~decimal.Decimal`, or None for blank input

    """
    if text is None or not text.strip():
        return None
    msg = f"{text.strip()} is not a valid decimal number."
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        raise ValidationError(text, msg) from None
    if not value.is_finite():
        raise ValidationError(text, msg)
    try:
        hours = to_hours(value)
    except InvalidOperation:
        raise ValidationError(text, msg) from None
    if abs(hours) >= HOURS_LIMIT:
        raise ValidationError(text, msg)
    return hours


def parse_difficulty(text: str | None) -> int | None:
    """
    Convert console input to a difficulty rating.

    Raises:
        ValidationError: ``text`` is not a whole number from 1 to 5

    """
    difficulty = parse_int(text)
    if difficulty is not None and not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        msg = (
            f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, "
            f"not {difficulty}."
        )
        raise ValidationError(str(text), msg)
    return difficulty


def get_int_input(prompt: str) -> int | None:
    """
    Print ``prompt`` and read an integer; blank input gives None.
    """
    return parse_int(get_string_input(prompt))


def get_decimal_input(prompt: str) -> Decimal | None:
    """
    Print ``prompt`` and read a two-place decimal; blank input gives None.
    """
    return parse_decimal(get_string_input(prompt))


def get_difficulty_input(prompt: str) -> int | None:
    """
    Print ``prompt`` and read a difficulty from 1 to 5; blank input gives None.
    """
    return parse_difficulty(get_string_input(prompt))
