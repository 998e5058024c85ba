"""
coders.py

A Huffman coder bound to one alphabet.
"""


from typing import Dict, Optional

from . import codec
from .logger import CodingLog, Logger
from .models import Alphabet, AlphabetSource
from .tree import Node, build_tree


class HuffmanCoder:
    """
    Builds the Huffman tree of an alphabet once and encodes and decodes
    text with it.

    The tree and the code table are both built in the constructor and
    never change afterwards, so one coder can be shared between threads.
    """

    def __init__(self, alphabet: AlphabetSource, logger: Optional[Logger] = None) -> None:
        """
        Args:
            alphabet: An Alphabet, a {symbol: weight} mapping or a sequence
                of (symbol, weight) pairs.
            logger (Optional[Logger]): Receives the tree construction logs
                and one CodingLog per encode or decode call.

        Raises:
            InvalidInput: If the alphabet cannot be used to build a tree.
        """
        self.alphabet: Alphabet = Alphabet.coerce(alphabet)
        self.logger: Optional[Logger] = logger
        self.root: Node = build_tree(self.alphabet, logger)
        self._code_table: Dict[str, str] = codec.get_code_table(self.root)

    @classmethod
    def from_text(cls, text: str, logger: Optional[Logger] = None) -> "HuffmanCoder":
        """Build a coder weighted by the character counts of text."""
        return cls(Alphabet.from_text(text), logger)

    def encode(self, text: str) -> str:
        encoded = codec.encode_with_table(self._code_table, text)
        if self.logger is not None:
            self.logger.log(CodingLog(len(text), len(encoded)))
        return encoded

    def decode(self, bits: str) -> str:
        text = codec.decode_text(self.root, bits)
        if self.logger is not None:
            self.logger.log(CodingLog(len(text), len(bits)))
        return text

    def encode_symbol(self, symbol: str) -> str:
        return codec.encode_symbol(self.root, symbol)

    def decode_symbol(self, bits: str) -> str:
        return codec.decode_symbol(self.root, bits)

    def get_code_table(self) -> Dict[str, str]:
        return dict(self._code_table)

    def get_max_bit_length(self) -> int:
        return codec.get_max_bit_length(self.root)

    def get_encoding_bit_length(self, symbol: str) -> int:
        return codec.get_encoding_bit_length(self.root, symbol)

    def get_average_bit_length(self) -> float:
        return codec.get_average_bit_length(self.root)

    def get_entropy(self) -> float:
        return codec.get_entropy(self.root)

    def get_compression_factor(self, text: str) -> float:
        return codec.get_compression_factor(self.root, text)
