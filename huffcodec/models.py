"""
models.py

The shared objects used in the huffcodec.

"""


import collections.abc
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import InvalidInput, SymbolNotFound
from .validators import validate_symbol, validate_weight


class SymbolFrequency:
    """
    Represents a symbol together with its weight.

    Leaves of a Huffman tree carry a symbol; internal nodes carry None and
    the sum of the weights below them. Instances are immutable.
    """
    __slots__ = ("_symbol", "_weight")

    def __init__(self, symbol: Optional[str], weight: float) -> None:
        if symbol is not None:
            validate_symbol(symbol)
        validate_weight(weight)
        object.__setattr__(self, "_symbol", symbol)
        object.__setattr__(self, "_weight", weight)

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @property
    def weight(self) -> float:
        return self._weight

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SymbolFrequency is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self._symbol == other._symbol and self._weight == other._weight
        return False

    def __hash__(self) -> int:
        return hash((self._symbol, self._weight))

    def __str__(self) -> str:
        return f"[{self._symbol!r}, {self._weight}]"

    def __repr__(self) -> str:
        return f"SymbolFrequency({self._symbol!r}, {self._weight!r})"


AlphabetSource = Union["Alphabet", Mapping[str, float], Iterable[Union[SymbolFrequency, Tuple[str, float]]]]


class Alphabet:
    """
    Represents the ordered set of unique symbols a code is built for,
    each with its weight.

    Weights may be raw counts or probabilities; nothing is normalized.
    """
    def __init__(self) -> None:
        self._entries: List[SymbolFrequency] = []
        self._weights: Dict[str, float] = {}

    def add(self, symbol: str, weight: float) -> SymbolFrequency:
        """
        Add a symbol to the alphabet.

        Args:
            symbol (str): A single character.
            weight (float): Its frequency, >= 0.

        Returns:
            SymbolFrequency: The stored entry.

        Raises:
            InvalidInput: If the symbol is already present or either value is invalid.
        """
        if symbol is None:
            raise InvalidInput("Alphabet symbols must not be None")
        entry = SymbolFrequency(symbol, weight)
        if symbol in self._weights:
            raise InvalidInput(f"Duplicate symbol {symbol!r} in alphabet")
        self._entries.append(entry)
        self._weights[symbol] = weight
        return entry

    def add_multiple(self, pairs: Iterable[Union[SymbolFrequency, Tuple[str, float]]]) -> int:
        """
        Add several entries in order.

        Args:
            pairs: SymbolFrequency items or (symbol, weight) tuples.

        Returns:
            int: Number of entries added.
        """
        count = 0
        for pair in pairs:
            if isinstance(pair, SymbolFrequency):
                self.add(pair.symbol, pair.weight)
            else:
                try:
                    symbol, weight = pair
                except (TypeError, ValueError):
                    raise InvalidInput(f"Alphabet entries must be (symbol, weight) pairs, got {pair!r}")
                self.add(symbol, weight)
            count += 1
        return count

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "Alphabet":
        """Build an alphabet from a {symbol: weight} mapping, keeping its order."""
        alphabet = cls()
        alphabet.add_multiple(mapping.items())
        return alphabet

    @classmethod
    def from_pairs(cls, pairs: Iterable[Union[SymbolFrequency, Tuple[str, float]]]) -> "Alphabet":
        """Build an alphabet from (symbol, weight) pairs or SymbolFrequency items."""
        alphabet = cls()
        alphabet.add_multiple(pairs)
        return alphabet

    @classmethod
    def from_text(cls, text: str) -> "Alphabet":
        """Build an alphabet from the character counts of text, in first-seen order."""
        if not isinstance(text, str):
            raise InvalidInput("Text must be of type str")
        counts: Dict[str, int] = {}
        for char in text:
            counts[char] = counts.get(char, 0) + 1
        return cls.from_mapping(counts)

    @classmethod
    def coerce(cls, source: AlphabetSource) -> "Alphabet":
        """Return source as an Alphabet, converting mappings and pair sequences."""
        if isinstance(source, Alphabet):
            return source
        if isinstance(source, collections.abc.Mapping):
            return cls.from_mapping(source)
        if isinstance(source, (str, bytes)):
            raise InvalidInput("An alphabet cannot be built from a bare string; use Alphabet.from_text")
        return cls.from_pairs(source)

    def contains(self, symbol: str) -> bool:
        return symbol in self._weights

    def get_weight(self, symbol: str) -> float:
        """
        Get the weight of the given symbol.

        Raises:
            SymbolNotFound: If the symbol is not in the alphabet.
        """
        try:
            return self._weights[symbol]
        except KeyError:
            raise SymbolNotFound(symbol, f"Symbol {symbol!r} is not present in the alphabet")

    def get_size(self) -> int:
        return len(self._entries)

    def get_total_weight(self) -> float:
        return sum(entry.weight for entry in self._entries)

    def get_symbols(self) -> List[str]:
        return [entry.symbol for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolFrequency]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        """Alphabets are equal when they hold the same symbols with the same weights."""
        if not isinstance(other, Alphabet):
            return False
        return self._weights == other._weights

    def __repr__(self) -> str:
        return f"Alphabet({self._entries!r})"
