"""Predefined digit alphabets and radix-based alphabet selection.

Symbol order is digit value: the first symbol is 0, the last is radix - 1.
The strings are kept verbatim so encoded text stays compatible with other
implementations that use the same tables.
"""

import logging

from radixcode.core.errors import AlphabetError

logger = logging.getLogger(__name__)

# Only whitespace. Mostly a curiosity, but it round-trips like any other.
WHITESPACE_ALPHABET = (
    " \t\n\r\x0b\x85\xa0"
    "\u2000\u2001\u2002\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
)

# Hex in spirit, with 32 digits instead of 16
BASE32_HEX_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"

# RFC 4648: letters are the low digits, 2-7 the high ones
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Safe for file names on case-insensitive filesystems; 128 bits take 25 chars
BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Letters only, usable as an XML NCName; 128 bits take 23 chars
BASE52_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# The MIME base64 symbol set
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# Characters allowed in file names on case-sensitive filesystems
BASE85_ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "!#$%&()*+-;<=>?@^_`{|}~"
)

Z85_ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ".-:+=^!/*?&<>()[]{}@%$#"
)

# Printable ASCII except space, dash, backslash and apostrophe
BASE91_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "!#$%&()*+,./:;<=>?@[]^_`{|}~\""
)

# Printable ASCII except space
BASE94_ALPHABET = BASE91_ALPHABET + "-\\'"

# Printable ASCII plus space, tab, newline and carriage return
BASE98_ALPHABET = BASE94_ALPHABET + " \t\n\r"

# Searched in order by alphabet_for_radix(); the first one long enough wins.
STANDARD_ALPHABETS = (
    BASE32_HEX_ALPHABET,
    BASE36_ALPHABET,
    BASE52_ALPHABET,
    BASE62_ALPHABET,
    BASE64_ALPHABET,
    BASE85_ALPHABET,
    BASE91_ALPHABET,
    BASE94_ALPHABET,
)

# Used when no standard alphabet is long enough
FALLBACK_ALPHABET = BASE98_ALPHABET

MIN_RADIX = 2
MAX_RADIX = len(FALLBACK_ALPHABET)  # 98


def alphabet_for_radix(radix: int) -> str:
    """Return the first `radix` symbols of the smallest standard alphabet
    holding at least that many.

    Above the largest standard alphabet the fallback alphabet is truncated
    the same way, which drops its trailing whitespace symbols for radix
    95-97.
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise AlphabetError(
            f"No predefined alphabet for radix {radix}, "
            f"must be {MIN_RADIX}-{MAX_RADIX}"
        )
    for alphabet in STANDARD_ALPHABETS:
        if len(alphabet) >= radix:
            return alphabet[:radix]
    logger.warning(
        "Radix %d exceeds the standard alphabets, truncating the "
        "%d-symbol fallback alphabet", radix, len(FALLBACK_ALPHABET),
    )
    return FALLBACK_ALPHABET[:radix]
