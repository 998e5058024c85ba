"""
huffcodec: A Python library for building Huffman codes and encoding and decoding text with them.
"""

from .models import (
    SymbolFrequency,
    Alphabet,
)

from .errors import (
    HuffmanError,
    InvalidInput,
    SymbolNotFound,
    DecodingError,
    MalformedEncoding,
    PathExhausted,
    IncompleteCode,
    TruncatedEncoding,
)

from .tree import (
    Node,
    build_tree,
)

from .codec import (
    encode_symbol,
    decode_symbol,
    encode_text,
    decode_text,
    get_code_table,
    get_max_bit_length,
    get_encoding_bit_length,
    get_average_bit_length,
    get_entropy,
    get_compression_factor,
)

from .coders import HuffmanCoder

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeConstructionLog,
    CodingLog,
    ProgressStep,
    MergeProgressStep,
)

__all__ = [

    "SymbolFrequency",
    "Alphabet",

    "HuffmanError",
    "InvalidInput",
    "SymbolNotFound",
    "DecodingError",
    "MalformedEncoding",
    "PathExhausted",
    "IncompleteCode",
    "TruncatedEncoding",

    "Node",
    "build_tree",

    "encode_symbol",
    "decode_symbol",
    "encode_text",
    "decode_text",
    "get_code_table",
    "get_max_bit_length",
    "get_encoding_bit_length",
    "get_average_bit_length",
    "get_entropy",
    "get_compression_factor",

    "HuffmanCoder",

    "Logger",
    "Log",
    "LogLevel",
    "TreeConstructionLog",
    "CodingLog",
    "ProgressStep",
    "MergeProgressStep",
]
