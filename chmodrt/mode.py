import re
from argparse import ArgumentTypeError

from .errors import InvalidMode

MODE_PATTERN = re.compile(r"[0-7]{1,4}")
MODE_MASK = 0o7777


def parse_mode(text: str) -> int:
    """Parses a numeric mode of one to four octal digits into permission bits."""

    if not isinstance(text, str) or not MODE_PATTERN.fullmatch(text):
        raise InvalidMode(f"{text}: mode must be an octal between one and four digits")

    return int(text, 8)


def format_mode(mode: int) -> str:
    if not 0 <= mode <= MODE_MASK:
        raise ValueError(f"Invalid mode: {mode}")
    return f"{mode:o}"


def octal_mode(text: str) -> int:
    try:
        return parse_mode(text)
    except InvalidMode as e:
        raise ArgumentTypeError(str(e))
