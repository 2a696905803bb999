"""
Numeric encodings of DNA sequences.

This module provides:
- Integer index vectors
- One-hot encoding and decoding
"""

from dnatools.sequence.encoding import (
    base_indices,
    one_hot_encode,
    one_hot_decode,
    BASE_INDEX,
    NUM_BASES,
)

__all__ = [
    "base_indices",
    "one_hot_encode",
    "one_hot_decode",
    "BASE_INDEX",
    "NUM_BASES",
]
