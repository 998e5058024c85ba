"""
errors.py

Error types raised by huffcodec.

Every error derives from ValueError so callers that only care about bad
input can keep catching ValueError.
"""


from typing import Optional


class HuffmanError(ValueError):
    """Base class for all huffcodec errors."""
    pass


class InvalidInput(HuffmanError):
    """The alphabet or an argument cannot be used to build or query a code."""
    pass


class SymbolNotFound(HuffmanError):
    """The requested symbol has no leaf in the tree."""

    def __init__(self, symbol: str, message: Optional[str] = None) -> None:
        self.symbol = symbol
        if message is None:
            message = f"Symbol {symbol!r} is not present in the given tree"
        super().__init__(message)


class DecodingError(HuffmanError):
    """
    A bit sequence could not be decoded.

    Attributes:
        bits (str): The bit sequence being decoded.
        position (int): Index of the offending bit, or len(bits) when the
            problem is detected at the end of the input.
    """

    def __init__(self, message: str, bits: str, position: int) -> None:
        self.bits = bits
        self.position = position
        super().__init__(message)


class MalformedEncoding(DecodingError):
    """A character other than '0' or '1' was found."""

    def __init__(self, bits: str, position: int) -> None:
        super().__init__(
            f"The given encoding is not binary: {bits[position]!r} at position {position}",
            bits,
            position,
        )


class PathExhausted(DecodingError):
    """The bit sequence runs off the paths of the tree."""

    def __init__(self, bits: str, position: int) -> None:
        super().__init__(
            f"Bit {position} of the given encoding does not follow any path in the given tree",
            bits,
            position,
        )


class IncompleteCode(DecodingError):
    """All bits were consumed but the walk stopped on an internal node."""

    def __init__(self, bits: str) -> None:
        super().__init__(
            f"The encoding {bits!r} ends on an internal node of the given tree",
            bits,
            len(bits),
        )


class TruncatedEncoding(DecodingError):
    """The encoded text ends with bits that do not resolve to a symbol."""

    def __init__(self, bits: str, position: int) -> None:
        self.trailing_bits = bits[position:]
        super().__init__(
            f"The encoded text ends with an incomplete code {self.trailing_bits!r} starting at position {position}",
            bits,
            position,
        )
