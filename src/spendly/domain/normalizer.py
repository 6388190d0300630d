"""Message text normalization."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_message(text: str) -> str:
    """Collapse line breaks and whitespace runs into single spaces.

    SMS bodies often contain embedded newlines which would otherwise break
    single-line pattern matching.
    """
    return _WHITESPACE.sub(" ", text.replace("\n", " ")).strip()
