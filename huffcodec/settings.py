#settings.py

#Bits per symbol of the fixed-width encoding used as the compression baseline
BASELINE_SYMBOL_BITS = 8

BIT_ZERO = "0"
BIT_ONE = "1"

#Tree rendering
TREE_INDENT = " " * 7
TREE_ROOT_LABEL = "[    ROOT    ]"
TREE_BRANCH_FORMAT = "|__ ({bit})"

#Approximate relative frequencies of English letters and punctuation
ENGLISH_FREQUENCIES = {
    ' ': 0.18,
    'E': 0.11,
    'T': 0.09,
    'A': 0.08,
    'O': 0.07,
    'I': 0.07,
    'N': 0.06,
    'S': 0.06,
    'H': 0.06,
    'R': 0.06,
    'D': 0.04,
    'L': 0.04,
    'U': 0.03,
    'C': 0.03,
    'M': 0.03,
    'W': 0.03,
    'F': 0.02,
    'G': 0.02,
    'Y': 0.02,
    'P': 0.02,
    'B': 0.015,
    'V': 0.01,
    'K': 0.01,
    'X': 0.005,
    'Q': 0.002,
    'J': 0.002,
    'Z': 0.001,
    ',': 0.015,
    '.': 0.015,
    '!': 0.005,
    '?': 0.005,
    ':': 0.002,
    ';': 0.002,
    '\'': 0.005,
    '"': 0.002,
}

DEMO_TEXT = "The quick brown fox jumps over the lazy dog."
