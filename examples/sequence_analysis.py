#!/usr/bin/env python3
"""
Example: Sequence Analysis with DNATools

This example walks through the sequence algorithms:
- Parsing DNA strings
- Comparing sequences
- Composition and longest runs
- Subsequence search and insertion
- Three-frame translation
"""

import sys
sys.path.insert(0, '..')

from dnatools import (
    InvalidBaseError,
    format_sequence,
    parse_sequence,
    try_parse_sequence,
    one_hot_encode,
)
from dnatools.utils import (
    bases_differences,
    complementary,
    contains,
    count_bases,
    hamming_distance,
    insert_subsequence,
    longest_sequences,
    translate,
)


def demo_parsing():
    """Demonstrate the two parsing tiers."""
    print("\n" + "=" * 60)
    print("PARSING")
    print("=" * 60)

    for text in ["ATCG", "ATXG"]:
        print(f"\ntry_parse_sequence({text!r}) -> {try_parse_sequence(text)}")

    try:
        parse_sequence("ATXG")
    except InvalidBaseError as e:
        print(f"parse_sequence('ATXG') raised: {e}")


def demo_comparison():
    """Demonstrate Hamming distance and mismatch positions."""
    print("\n" + "=" * 60)
    print("SEQUENCE COMPARISON")
    print("=" * 60)

    pairs = [("ATCG", "ATGG"), ("ATCG", "TAGC"), ("TTAAT", "TTAAGCA")]
    for s1, s2 in pairs:
        seq1, seq2 = parse_sequence(s1), parse_sequence(s2)
        print(f"\n{s1} vs {s2}")
        print(f"   Hamming distance: {hamming_distance(seq1, seq2)}")
        print(f"   Differences at:   {bases_differences(seq1, seq2)}")


def demo_properties():
    """Demonstrate composition, complement and longest runs."""
    print("\n" + "=" * 60)
    print("SEQUENCE PROPERTIES")
    print("=" * 60)

    seq = parse_sequence("ATTTTAACCCCGCG")
    print(f"\nSequence:      {format_sequence(seq)}")
    print(f"Complementary: {format_sequence(complementary(seq))}")
    print(f"Composition:   {count_bases(seq)}")
    print(f"Longest runs:  {longest_sequences(seq)}")
    print(f"One-hot shape: {one_hot_encode(seq).shape}")


def demo_subsequences():
    """Demonstrate subsequence search and insertion."""
    print("\n" + "=" * 60)
    print("SUBSEQUENCES")
    print("=" * 60)

    seq = parse_sequence("AAGCTTGA")
    for motif in ["TTG", "ATG"]:
        print(f"\n{motif} in AAGCTTGA: {contains(seq, parse_sequence(motif))}")

    inserted = insert_subsequence(seq, parse_sequence("ATG"), 4)
    print(f"Insert ATG at 4: {format_sequence(inserted)}")


def demo_translation():
    """Demonstrate three-frame translation."""
    print("\n" + "=" * 60)
    print("TRANSLATION")
    print("=" * 60)

    seq = parse_sequence("AGGTGACACCGCAAGCCTTATATTAGC")
    print(f"\nSequence: {format_sequence(seq)}")
    for frame, protein in enumerate(translate(seq)):
        print(f"   Frame {frame}: {protein}")


if __name__ == "__main__":
    demo_parsing()
    demo_comparison()
    demo_properties()
    demo_subsequences()
    demo_translation()
