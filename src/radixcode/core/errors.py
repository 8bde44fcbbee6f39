"""Exceptions raised by the radix codec.

All of them are ValueError subclasses, so callers that only care about
"bad input" can keep catching ValueError.
"""


class CodecError(ValueError):
    """Base class for codec errors."""


class AlphabetError(CodecError):
    """An alphabet is unusable (strict construction, radix selection)."""


class EncodeError(CodecError):
    """A value has no encoding under the fixed bias."""


class DecodeError(CodecError):
    """Encoded text could not be turned back into a value."""


class SymbolNotFoundError(DecodeError):
    """A symbol in the text is not part of the codec's alphabet."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol not found in alphabet: {symbol!r} at position {position}")


class ValueOutOfRangeError(DecodeError):
    """A decoded value does not fit the requested byte width."""

    def __init__(self, value: int, length: int):
        self.value = value
        self.length = length
        super().__init__(f"Decoded value {value} does not fit in {length} signed bytes")
