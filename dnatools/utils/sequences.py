"""
Core sequence algorithms.

Comparison functions pair bases positionally and only look at the
first min(len(seq1), len(seq2)) positions.
"""

from typing import Dict, List, Optional, Sequence

import numpy as np

from dnatools.bases import Base, format_sequence
from dnatools.sequence.encoding import base_indices, NUM_BASES


def _paired_indices(seq1: Sequence[Base], seq2: Sequence[Base]):
    """Index vectors of both sequences truncated to the shorter length."""
    n = min(len(seq1), len(seq2))
    return base_indices(seq1[:n]), base_indices(seq2[:n])


def hamming_distance(seq1: Sequence[Base], seq2: Sequence[Base]) -> int:
    """
    Calculate the Hamming distance between two sequences.

    Trailing bases of the longer sequence are ignored.

    Args:
        seq1: First sequence
        seq2: Second sequence

    Returns:
        Number of paired positions where the bases differ

    Example:
        >>> hamming_distance(parse_sequence("TTAAT"), parse_sequence("TTAAGCA"))
        1
    """
    left, right = _paired_indices(seq1, seq2)
    return int(np.count_nonzero(left != right))


def bases_differences(seq1: Sequence[Base], seq2: Sequence[Base]) -> List[int]:
    """
    Find the positions where two sequences differ.

    Same pairing rule as hamming_distance.

    Returns:
        Ascending 0-based indices of the mismatching positions
    """
    left, right = _paired_indices(seq1, seq2)
    return np.flatnonzero(left != right).tolist()


def complementary(sequence: Sequence[Base]) -> List[Base]:
    """
    Return the complementary strand (A<->T, C<->G), in the same order.

    Example:
        >>> complementary([Base.A, Base.T, Base.C, Base.G])
        [T, A, G, C]
    """
    return [base.complement for base in sequence]


def count_bases(sequence: Sequence[Base]) -> Dict[Base, int]:
    """
    Count the occurrences of each base.

    All four bases are always present in the result, absent ones
    with a count of 0.
    """
    counts = np.bincount(base_indices(sequence), minlength=NUM_BASES)
    return {base: int(counts[i]) for i, base in enumerate(Base)}


def contains(sequence: Sequence[Base], subsequence: Sequence[Base]) -> bool:
    """
    Check whether subsequence occurs as a contiguous run in sequence.

    The empty subsequence is contained in every sequence.
    """
    return format_sequence(subsequence) in format_sequence(sequence)


def insert_subsequence(
    sequence: Sequence[Base],
    subsequence: Sequence[Base],
    offset: int
) -> List[Base]:
    """
    Splice a subsequence into a sequence.

    Args:
        sequence: Sequence to insert into
        subsequence: Bases to insert
        offset: Position of the first inserted base, 0 <= offset <= len(sequence).
            An offset equal to len(sequence) appends.

    Returns:
        New sequence; bases of `sequence` from `offset` on are shifted right

    Example:
        >>> insert_subsequence([Base.A, Base.G], [Base.T, Base.C], 1)
        [A, T, C, G]
    """
    if not 0 <= offset <= len(sequence):
        raise ValueError(
            f"Offset {offset} out of range for sequence of length {len(sequence)}"
        )
    return list(sequence[:offset]) + list(subsequence) + list(sequence[offset:])


def longest_sequences(sequence: Sequence[Base]) -> Dict[Base, int]:
    """
    Find the longest uninterrupted run of each base.

    Example:
        >>> longest_sequences(parse_sequence("ATTTTAACCCCGCG"))
        {A: 2, T: 4, C: 4, G: 1}

    Returns:
        Mapping of every base to its longest run length (0 if absent)
    """
    longest = {base: 0 for base in Base}
    run_base: Optional[Base] = None
    run_length = 0

    for base in sequence:
        if base is run_base:
            run_length += 1
            continue
        if run_base is not None and run_length > longest[run_base]:
            longest[run_base] = run_length
        run_base = base
        run_length = 1

    # The last run is never closed by a following base
    if run_base is not None and run_length > longest[run_base]:
        longest[run_base] = run_length

    return longest
