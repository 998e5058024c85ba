"""
codec.py

Encoding, decoding and code metrics over a Huffman tree.

Encoded text is a string of '0' and '1' characters, one per branch taken
from the root ('0' = left, '1' = right). Packing those bits into bytes is
left to the caller.
"""


import math
from typing import Dict, List, Tuple

import numpy as np

from .errors import IncompleteCode, InvalidInput, MalformedEncoding, PathExhausted, SymbolNotFound, TruncatedEncoding
from .settings import BASELINE_SYMBOL_BITS, BIT_ONE, BIT_ZERO
from .tree import Node
from .validators import validate_type


def encode_symbol(root: Node, symbol: str) -> str:
    """
    Find the code of a symbol by a depth-first search, left before right.

    Args:
        root (Node): The root of the Huffman tree.
        symbol (str): The symbol to encode.

    Returns:
        str: The path from the root to the symbol's leaf. Empty when the
        root itself is the leaf.

    Raises:
        SymbolNotFound: If no leaf carries the symbol.
    """
    validate_type(root, "Root", Node)
    stack: List[Tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            if node.symbol == symbol:
                return path
        else:
            stack.append((node.right, path + BIT_ONE))
            stack.append((node.left, path + BIT_ZERO))
    raise SymbolNotFound(symbol)


def decode_symbol(root: Node, bits: str) -> str:
    """
    Walk the tree from the root following bits and return the symbol of
    the leaf reached.

    Raises:
        MalformedEncoding: If a character is neither '0' nor '1'.
        PathExhausted: If a bit asks for a child that does not exist.
        IncompleteCode: If the bits end on an internal node.
    """
    validate_type(root, "Root", Node)
    validate_type(bits, "Bits", str)
    node = root
    for position, bit in enumerate(bits):
        if bit == BIT_ZERO:
            child = node.left
        elif bit == BIT_ONE:
            child = node.right
        else:
            raise MalformedEncoding(bits, position)
        if child is None:
            raise PathExhausted(bits, position)
        node = child
    if not node.is_leaf():
        raise IncompleteCode(bits)
    return node.symbol


def get_code_table(root: Node) -> Dict[str, str]:
    """
    Map every symbol of the tree to its code.

    Returns:
        Dict[str, str]: symbol -> code, in left-to-right leaf order.
    """
    validate_type(root, "Root", Node)
    table: Dict[str, str] = {}
    stack: List[Tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            table[node.symbol] = path
        else:
            stack.append((node.right, path + BIT_ONE))
            stack.append((node.left, path + BIT_ZERO))
    return table


def encode_with_table(table: Dict[str, str], text: str) -> str:
    """
    Encode text with a precomputed code table.

    Raises:
        SymbolNotFound: For the first symbol of text missing from the table.
    """
    validate_type(text, "Text", str)
    codes = []
    for symbol in text:
        code = table.get(symbol)
        if code is None:
            raise SymbolNotFound(symbol)
        codes.append(code)
    return "".join(codes)


def encode_text(root: Node, text: str) -> str:
    """
    Encode every symbol of text, in order, and concatenate the codes.

    Raises:
        SymbolNotFound: For the first symbol of text missing from the tree.
            Nothing is returned in that case.
    """
    return encode_with_table(get_code_table(root), text)


def decode_text(root: Node, bits: str) -> str:
    """
    Decode a concatenation of codes back into text.

    A cursor descends one branch per bit and emits the symbol whenever it
    lands on a leaf, then restarts from the root. Because the code is
    prefix-free the first leaf reached is always the right one.

    Args:
        root (Node): The root of the Huffman tree.
        bits (str): The encoded text.

    Returns:
        str: The decoded text.

    Raises:
        MalformedEncoding: If a character is neither '0' nor '1'.
        TruncatedEncoding: If the bits end without resolving to a symbol,
            either in the middle of a code or after a bit that no branch
            can follow (a single-leaf tree has no branches at all).
    """
    validate_type(root, "Root", Node)
    validate_type(bits, "Bits", str)
    symbols: List[str] = []
    node = root
    start = 0
    stuck = False
    for position, bit in enumerate(bits):
        if bit != BIT_ZERO and bit != BIT_ONE:
            raise MalformedEncoding(bits, position)
        if stuck:
            continue
        child = node.left if bit == BIT_ZERO else node.right
        if child is None:
            # Keep scanning so malformed characters further on are still reported.
            stuck = True
            continue
        if child.is_leaf():
            symbols.append(child.symbol)
            node = root
            start = position + 1
        else:
            node = child
    if stuck or node is not root:
        raise TruncatedEncoding(bits, start)
    return "".join(symbols)


def get_max_bit_length(root: Node) -> int:
    """Length of the longest code, i.e. the height of the tree."""
    validate_type(root, "Root", Node)
    return root.get_height()


def get_encoding_bit_length(root: Node, symbol: str) -> int:
    """Number of bits in the code of symbol. Raises SymbolNotFound if absent."""
    return len(encode_symbol(root, symbol))


def get_average_bit_length(root: Node) -> float:
    """
    Weighted sum of the code lengths, using the leaf weights as given.

    With probabilities as weights this is the expected number of bits per
    symbol; with raw counts it is the total bit count of the counted text.
    """
    validate_type(root, "Root", Node)
    leaves = list(root.iter_leaves())
    weights = np.array([leaf.weight for leaf, _ in leaves], dtype=np.float64)
    depths = np.array([depth for _, depth in leaves], dtype=np.float64)
    return float(np.dot(weights, depths))


def get_entropy(root: Node) -> float:
    """
    Shannon entropy, in bits per symbol, of the leaf weights normalized to
    probabilities. This bounds the normalized average bit length from below.
    """
    validate_type(root, "Root", Node)
    weights = np.array([leaf.weight for leaf, _ in root.iter_leaves()], dtype=np.float64)
    total = np.sum(weights)
    if total == 0:
        return 0.0
    probs = weights[weights > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def get_compression_factor(root: Node, text: str) -> float:
    """
    Ratio between the size of text in a fixed 8-bit encoding and the size
    of its Huffman encoding.

    Returns:
        float: The factor, or math.inf when every symbol of text has an
        empty code (single-leaf tree).

    Raises:
        InvalidInput: If text is empty.
        SymbolNotFound: As encode_text.
    """
    validate_type(text, "Text", str)
    if len(text) == 0:
        raise InvalidInput("Cannot compute the compression factor of an empty text")
    encoded = encode_text(root, text)
    if len(encoded) == 0:
        return math.inf
    return (len(text) * BASELINE_SYMBOL_BITS) / len(encoded)
