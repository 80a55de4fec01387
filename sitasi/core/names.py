"""Author name parsing for citation formatting."""

import re

from .models import ParsedName

_TRAILING_COMMA = re.compile(r",\s*$")


def parse_author_name(
    author: str | None, author_family_name: str | None = None
) -> ParsedName:
    """Split a raw author string into first and last name.

    Rules, in priority order:

    1. No author: both components are empty.
    2. Explicit family name: it becomes the last name, and the first name is
       the author string with the first occurrence of the family name
       removed, trimmed, and stripped of a trailing comma.
    3. "Last, First": the first two comma-separated parts, trimmed.
    4. "First Middle Last": the final space-separated token is the last name.
    5. A single token is taken as the last name.

    The removal in rule 2 is a plain substring replacement, so a family name
    that also occurs earlier in the string removes that earlier occurrence
    ("Alice Ali" with family name "Ali" yields first name "ce Ali").

    Args:
        author: Raw author string, "Last, First" or "First Last"
        author_family_name: Optional explicit family name

    Returns:
        ParsedName with first and last name
    """
    if not author:
        return ParsedName(first_name="", last_name="")

    if author_family_name:
        first_name = author.replace(author_family_name, "", 1).strip()
        first_name = _TRAILING_COMMA.sub("", first_name)
        return ParsedName(first_name=first_name, last_name=author_family_name)

    parts = [part.strip() for part in author.split(",")]
    if len(parts) >= 2:
        return ParsedName(first_name=parts[1], last_name=parts[0])

    tokens = author.split(" ")
    if len(tokens) >= 2:
        return ParsedName(first_name=" ".join(tokens[:-1]), last_name=tokens[-1])

    return ParsedName(first_name="", last_name=author)


def get_initials(first_name: str) -> str:
    """Abbreviate given names to initials.

    "John Middle" becomes "J. M.". Each space-separated token contributes
    its upper-cased first character followed by a period.
    """
    if not first_name:
        return ""

    return " ".join(token[:1].upper() + "." for token in first_name.split(" "))
