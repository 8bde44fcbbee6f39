"""Arbitrary-radix text encoding of signed integers, byte strings and UUIDs.

The radix is the length of the alphabet; a symbol's position is its digit
value. Encoded text is written least-significant digit first, with no
padding or separators.

Every value is shifted up by BIAS = 2**127 before its digits are taken and
shifted back down after decoding. That maps the whole signed 128-bit range
(raw hashes and UUIDs read as two's complement) onto non-negative working
values, so each value has exactly one encoding. -2**127 encodes to the
single symbol alphabet[0].

Meant for short quantities (UUIDs, hashes, addresses), not for bulk data.
"""

import logging
import uuid
from collections import Counter
from collections.abc import Sequence
from dataclasses import InitVar, dataclass, field

from radixcode.core import alphabets
from radixcode.core.errors import (
    AlphabetError,
    EncodeError,
    SymbolNotFoundError,
    ValueOutOfRangeError,
)
from radixcode.core.uuid_layout import UUID_BYTES, uuid_from_bytes, uuid_to_bytes

logger = logging.getLogger(__name__)

BIAS = 1 << 127


@dataclass(frozen=True)
class Codec:
    """Encoder/decoder for one alphabet.

    Instances are immutable and can be shared freely between threads.
    Duplicate symbols are not checked unless ``strict=True``; with
    duplicates, decoding is ambiguous.
    """

    alphabet: str
    strict: InitVar[bool] = False
    radix: int = field(init=False, repr=False)
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self, strict: bool):
        alphabet = self.alphabet
        if not isinstance(alphabet, str):
            symbols = list(alphabet)
            if strict and any(len(s) != 1 for s in symbols):
                raise AlphabetError(f"Alphabet symbols must be single characters: {symbols!r}")
            alphabet = "".join(symbols)
        if len(alphabet) < alphabets.MIN_RADIX:
            raise AlphabetError(
                f"Alphabet needs at least {alphabets.MIN_RADIX} symbols, got {len(alphabet)}"
            )
        if strict and len(set(alphabet)) != len(alphabet):
            duplicates = sorted(c for c, n in Counter(alphabet).items() if n > 1)
            raise AlphabetError(f"Duplicate symbols in alphabet: {duplicates!r}")

        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "radix", len(alphabet))
        object.__setattr__(self, "_index", {c: i for i, c in enumerate(alphabet)})
        logger.debug("Created radix-%d codec", self.radix)

    @classmethod
    def for_radix(cls, radix: int) -> "Codec":
        """Codec over the first `radix` symbols of the smallest standard
        alphabet that is long enough (see alphabets.alphabet_for_radix)."""
        return cls(alphabets.alphabet_for_radix(radix))

    def encode(self, value: int | bytes | uuid.UUID) -> str:
        """Encode an int, a bytes-like object or a UUID."""
        if isinstance(value, uuid.UUID):
            return self.encode_uuid(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.encode_bytes(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return self.encode_int(value)
        raise TypeError(f"Cannot encode value of type {type(value).__name__}")

    def encode_int(self, value: int) -> str:
        """Encode a signed integer, least-significant digit first.

        Any value >= -2**127 is accepted; there is no upper bound.
        """
        working = value + BIAS
        if working < 0:
            raise EncodeError(f"Value must be >= {-BIAS}, got {value}")
        digits = []
        # At least one digit, even when the working value is already 0.
        while True:
            working, digit = divmod(working, self.radix)
            digits.append(self.alphabet[digit])
            if working == 0:
                break
        return "".join(digits)

    def encode_bytes(self, data: bytes) -> str:
        """Encode bytes read as a big-endian two's-complement integer.

        The top bit of the first byte is the sign bit. Prepend a zero byte
        to encode the bytes as an unsigned number instead.
        """
        if len(data) == 0:
            raise EncodeError("Cannot encode an empty byte sequence")
        return self.encode_int(int.from_bytes(data, "big", signed=True))

    def encode_uuid(self, value: uuid.UUID) -> str:
        return self.encode_bytes(uuid_to_bytes(value))

    def decode(self, text: str | Sequence[str]) -> int:
        """Decode text produced by encode() back to a signed integer.

        Symbols must match exactly (no case folding). Empty text decodes
        to -2**127.
        """
        total = 0
        weight = 1
        for position, symbol in enumerate(text):
            digit = self._index.get(symbol)
            if digit is None:
                raise SymbolNotFoundError(symbol, position)
            total += digit * weight
            weight *= self.radix
        return total - BIAS

    def decode_bytes(self, text: str | Sequence[str], length: int) -> bytes:
        """Decode to exactly `length` big-endian two's-complement bytes."""
        value = self.decode(text)
        try:
            return value.to_bytes(length, "big", signed=True)
        except OverflowError:
            raise ValueOutOfRangeError(value, length) from None

    def decode_uuid(self, text: str | Sequence[str]) -> uuid.UUID:
        return uuid_from_bytes(self.decode_bytes(text, UUID_BYTES))


# Ready-made codecs for the predefined alphabets
WHITESPACE = Codec(alphabets.WHITESPACE_ALPHABET)
BASE32_HEX = Codec(alphabets.BASE32_HEX_ALPHABET)
BASE32 = Codec(alphabets.BASE32_ALPHABET)
BASE36 = Codec(alphabets.BASE36_ALPHABET)
BASE52 = Codec(alphabets.BASE52_ALPHABET)
BASE62 = Codec(alphabets.BASE62_ALPHABET)
BASE64 = Codec(alphabets.BASE64_ALPHABET)
BASE85 = Codec(alphabets.BASE85_ALPHABET)
Z85 = Codec(alphabets.Z85_ALPHABET)
BASE91 = Codec(alphabets.BASE91_ALPHABET)
BASE94 = Codec(alphabets.BASE94_ALPHABET)
BASE98 = Codec(alphabets.BASE98_ALPHABET)
