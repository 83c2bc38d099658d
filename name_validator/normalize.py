"""
Name normalization applied before a name is sent to the validation service.

Steps (order matters):
- compatibility decomposition (NFKD)
- typographic single quotes -> '
- typographic double quotes -> "
- strip combining diacritical marks
- collapse whitespace runs, then trim
"""

from __future__ import annotations

import unicodedata

from .rules import (
    ASCII_DOUBLE_QUOTE,
    ASCII_SINGLE_QUOTE,
    COMBINING_MARKS,
    DOUBLE_QUOTE_VARIANTS,
    SINGLE_QUOTE_VARIANTS,
    UNICODE_FORM,
    WHITESPACE_RUN,
)


def normalize_name(raw: str) -> str:
    """
    Return the canonical form of a raw name.

    Total for any str: an empty input gives an empty output, and characters
    outside the documented substitutions are left as they are.
    """
    text = unicodedata.normalize(UNICODE_FORM, raw)
    text = SINGLE_QUOTE_VARIANTS.sub(ASCII_SINGLE_QUOTE, text)
    text = DOUBLE_QUOTE_VARIANTS.sub(ASCII_DOUBLE_QUOTE, text)
    # Accents only become separable marks after decomposition above.
    text = COMBINING_MARKS.sub("", text)
    text = WHITESPACE_RUN.sub(" ", text)
    return text.strip()
