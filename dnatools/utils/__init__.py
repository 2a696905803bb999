"""
Sequence algorithms for DNA.

This module provides:
- Sequence comparison (Hamming distance, mismatch positions)
- Complementation and base composition
- Subsequence search and insertion
- Longest run per base
- Codon translation
"""

from dnatools.utils.sequences import (
    hamming_distance,
    bases_differences,
    complementary,
    count_bases,
    contains,
    insert_subsequence,
    longest_sequences,
)

from dnatools.utils.translation import (
    translate,
    translate_frame,
    codons,
    build_codon_table,
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
    TRANSLATION_TABLE_SOURCE,
)

__all__ = [
    "hamming_distance",
    "bases_differences",
    "complementary",
    "count_bases",
    "contains",
    "insert_subsequence",
    "longest_sequences",
    "translate",
    "translate_frame",
    "codons",
    "build_codon_table",
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    "TRANSLATION_TABLE_SOURCE",
]
