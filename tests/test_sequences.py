"""Tests for the sequence algorithms."""

import pytest
from hypothesis import assume, given, strategies as st

from dnatools import (
    Base,
    bases_differences,
    complementary,
    contains,
    count_bases,
    hamming_distance,
    insert_subsequence,
    longest_sequences,
    parse_sequence,
)

from dna_strategies import dna_sequences

A, T, C, G = Base.A, Base.T, Base.C, Base.G


class TestHammingDistance:
    """Hamming distance over the paired prefix."""

    @pytest.mark.parametrize(
        "seq1,seq2,expected",
        [
            ([A, T, C, G], [A, T, C, G], 0),
            ([A, T, C, G], [A, T, G, G], 1),
            ([A, T, C, G], [T, A, G, C], 4),
            ([A, T, C, G], [G, C, T, A], 4),
            ([A, T, C, G], [A, C, C, A], 2),
            ([T, T, A, A, T], [T, T, A, A, G, C, A], 1),
            ([A, T, C, G], [A, T], 0),
            ([A, T, C, G], [], 0),
            ([], [], 0),
        ],
    )
    def test_examples(self, seq1, seq2, expected):
        assert hamming_distance(seq1, seq2) == expected

    def test_returns_python_int(self):
        assert type(hamming_distance([A], [T])) is int

    def test_accepts_tuples(self):
        assert hamming_distance((A, T), (A, G)) == 1

    @given(dna_sequences)
    def test_distance_to_self_is_zero(self, seq):
        assert hamming_distance(seq, seq) == 0

    @given(dna_sequences, dna_sequences)
    def test_matches_number_of_differences(self, seq1, seq2):
        assert hamming_distance(seq1, seq2) == len(bases_differences(seq1, seq2))

    @given(dna_sequences, dna_sequences)
    def test_symmetric(self, seq1, seq2):
        assert hamming_distance(seq1, seq2) == hamming_distance(seq2, seq1)


class TestBasesDifferences:
    """Mismatch positions."""

    @pytest.mark.parametrize(
        "seq1,seq2,expected",
        [
            ([A, T, C, G], [A, T, C, G], []),
            ([A, T, C, G], [A, T], []),
            ([A, T, C, G], [], []),
            ([A, T, C, G], [G, C, T, A], [0, 1, 2, 3]),
            ([A, T, C, G], [A, C, C, A], [1, 3]),
        ],
    )
    def test_examples(self, seq1, seq2, expected):
        assert bases_differences(seq1, seq2) == expected


class TestComplementary:
    """Complementary strand."""

    def test_examples(self):
        assert complementary([]) == []
        assert complementary([A, T, C, G]) == [T, A, G, C]
        assert complementary([A, A, G, C, T, T, G, A]) == [T, T, C, G, A, A, C, T]

    @given(dna_sequences)
    def test_involution(self, seq):
        assert complementary(complementary(seq)) == seq


class TestCountBases:
    """Base composition."""

    def test_empty_has_all_keys(self):
        assert count_bases([]) == {A: 0, T: 0, C: 0, G: 0}

    def test_examples(self):
        assert count_bases([A, T, C, G]) == {A: 1, T: 1, C: 1, G: 1}
        assert count_bases([A, A, G, C, T, T, G, A]) == {A: 3, T: 2, C: 1, G: 2}

    @given(dna_sequences)
    def test_counts_sum_to_length(self, seq):
        counts = count_bases(seq)
        assert set(counts) == set(Base)
        assert sum(counts.values()) == len(seq)


class TestContains:
    """Contiguous subsequence search."""

    def test_examples(self):
        assert contains([], [])
        assert not contains([], [A])
        assert contains([A, A, G, C, T, T, G, A], [T, T, G])
        assert not contains([A, A, G, C, T, T, G, A], [A, T, G])

    def test_empty_subsequence_always_contained(self):
        assert contains([A, C], [])

    def test_longer_subsequence_not_contained(self):
        assert not contains([A], [A, A])


class TestInsertSubsequence:
    """Subsequence splicing."""

    def test_examples(self):
        assert insert_subsequence([], [], 0) == []
        assert insert_subsequence([A, G], [T, C], 1) == [A, T, C, G]

    def test_offset_at_end_appends(self):
        assert insert_subsequence([A, G], [T], 2) == [A, G, T]

    def test_offset_zero_prepends(self):
        assert insert_subsequence([A, G], [T], 0) == [T, A, G]

    def test_does_not_mutate_input(self):
        seq = [A, G]
        insert_subsequence(seq, [T], 1)
        assert seq == [A, G]

    @pytest.mark.parametrize("offset", [-1, 3])
    def test_offset_out_of_range(self, offset):
        with pytest.raises(ValueError, match="out of range"):
            insert_subsequence([A, G], [T], offset)

    @given(dna_sequences, dna_sequences, st.data())
    def test_inserted_subsequence_is_contained(self, seq, sub, data):
        offset = data.draw(st.integers(min_value=0, max_value=len(seq)))
        result = insert_subsequence(seq, sub, offset)
        assert len(result) == len(seq) + len(sub)
        assert contains(result, sub)


class TestLongestSequences:
    """Longest run of each base."""

    def test_example(self):
        seq = parse_sequence("ATTTTAACCCCGCG")
        assert longest_sequences(seq) == {A: 2, T: 4, C: 4, G: 1}

    def test_empty(self):
        assert longest_sequences([]) == {A: 0, T: 0, C: 0, G: 0}

    def test_final_run_is_counted(self):
        seq = parse_sequence("ACGGGG")
        assert longest_sequences(seq) == {A: 1, T: 0, C: 1, G: 4}

    def test_single_run(self):
        assert longest_sequences([T, T, T]) == {A: 0, T: 3, C: 0, G: 0}

    def test_shorter_later_run_does_not_overwrite(self):
        seq = parse_sequence("AAAGAGA")
        assert longest_sequences(seq)[A] == 3

    @given(dna_sequences)
    def test_runs_bounded_by_counts(self, seq):
        longest = longest_sequences(seq)
        counts = count_bases(seq)
        for base in Base:
            assert longest[base] <= counts[base]
            assert (longest[base] == 0) == (counts[base] == 0)

    @given(dna_sequences)
    def test_longest_run_is_contained(self, seq):
        assume(seq)
        for base, length in longest_sequences(seq).items():
            assert contains(seq, [base] * length)
            assert not contains(seq, [base] * (length + 1))
