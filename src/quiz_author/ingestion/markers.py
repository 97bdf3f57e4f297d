"""Fixed marker vocabulary for bulk question text.

Previously authored content depends on these exact characters, so they are
constants rather than configuration.
"""

from __future__ import annotations

import re

KHMER_OPTION_MARKERS = ("ក", "ខ", "គ", "ឃ")
LATIN_OPTION_MARKERS = ("A", "B", "C", "D")

CORRECT_ANSWER_MARKER = "(ចម្លើយត្រឹមត្រូវ)"
FALLBACK_SUBJECT = "ទូទៅ"

UTF8_BOM = chr(0xFEFF)

# Whitespace trimmed from pasted text, byte order mark included.
WHITESPACE_CHARS = "".join(
    chr(code)
    for code in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)
_SPACE = "[" + re.escape(WHITESPACE_CHARS) + "]"

# ASCII-only case folding, so U+212A (Kelvin sign) or U+017F (long s) never
# pass for Latin letters. Khmer characters still match literally.
_FLAGS = re.IGNORECASE | re.ASCII

# Author numbering such as "1.", "១)", "IV.", "a)".
NUMBERING_PREFIX = re.compile(
    r"^(?:" + _SPACE + r"|[0-9០-៩a-zA-Z\-IVX])+" + _SPACE + r"*[.)]" + _SPACE + "*",
    _FLAGS,
)

OPTION_LINE = re.compile(
    r"^([" + "".join(KHMER_OPTION_MARKERS) + r"A-D])[.)]" + _SPACE + r"*(.*)",
    _FLAGS,
)

BLOCK_SEPARATOR = re.compile(r"\n" + _SPACE + r"*\n", _FLAGS)


def trim(value: str) -> str:
    return value.strip(WHITESPACE_CHARS)
