"""
Deterministic name normalization rules.

This file exists to make the substitutions explicit and enforceable.
"""

import re

UNICODE_FORM = "NFKD"

# left/right, low-9, high-reversed-9, prime, reversed prime
SINGLE_QUOTE_VARIANTS = re.compile("[\u2018\u2019\u201A\u201B\u2032\u2035]")
ASCII_SINGLE_QUOTE = "'"

DOUBLE_QUOTE_VARIANTS = re.compile("[\u201C\u201D\u201E\u201F\u2033\u2036]")
ASCII_DOUBLE_QUOTE = '"'

# Combining Diacritical Marks block only; other combining blocks pass through.
COMBINING_MARKS = re.compile("[\u0300-\u036F]")

# U+FEFF is not matched by \s but counts as whitespace in names
WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")
