"""
DNATools: sequence algorithms over the four-letter DNA alphabet

This package provides tools for:
- Parsing nucleobases and DNA strings
- Comparing sequences (Hamming distance, mismatch positions)
- Complementation, composition and longest runs
- Subsequence search and insertion
- Three-frame codon translation
- One-hot encoding with NumPy
"""

__version__ = "0.1.0"
__author__ = "DNATools Contributors"

from dnatools.bases import (
    Base,
    InvalidBaseError,
    try_parse,
    parse,
    try_parse_sequence,
    parse_sequence,
    format_sequence,
)

from dnatools.sequence import (
    one_hot_encode,
    one_hot_decode,
)

from dnatools.utils import (
    hamming_distance,
    bases_differences,
    complementary,
    count_bases,
    contains,
    insert_subsequence,
    longest_sequences,
    translate,
)

__all__ = [
    # Bases
    "Base",
    "InvalidBaseError",
    "try_parse",
    "parse",
    "try_parse_sequence",
    "parse_sequence",
    "format_sequence",
    # Encoding
    "one_hot_encode",
    "one_hot_decode",
    # Algorithms
    "hamming_distance",
    "bases_differences",
    "complementary",
    "count_bases",
    "contains",
    "insert_subsequence",
    "longest_sequences",
    "translate",
]
