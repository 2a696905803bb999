"""
Codon translation with the standard genetic code.

The codon table is parsed once at import from a packed four-line
literal: line 1 holds the amino acids, lines 2-4 the first, second and
third base of each codon, column by column.
"""

from itertools import product
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from dnatools.bases import Base, parse

Codon = Tuple[Base, Base, Base]

TRANSLATION_TABLE_SOURCE = """
FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG
TTTTTTTTTTTTTTTTCCCCCCCCCCCCCCCCAAAAAAAAAAAAAAAAGGGGGGGGGGGGGGGG
TTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGG
TCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAG
"""

STOP_SYMBOL = "*"
FRAMES = (0, 1, 2)


def build_codon_table(source: str) -> Mapping[Codon, str]:
    """
    Parse a packed translation table.

    Args:
        source: Four non-empty lines of equal length (amino acids, then
            first, second and third codon base)

    Returns:
        Read-only mapping from codon to one-letter amino acid code

    Raises:
        ValueError: If the table is malformed or does not cover each of
            the 64 codons exactly once
    """
    lines = [line.strip() for line in source.strip().splitlines()]
    if len(lines) != 4:
        raise ValueError(f"Translation table needs 4 lines, got {len(lines)}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("Translation table lines must have equal length")

    amino_acids, first, second, third = lines
    table = {}
    for aa, b1, b2, b3 in zip(amino_acids, first, second, third):
        codon = (parse(b1), parse(b2), parse(b3))
        if codon in table:
            raise ValueError(f"Duplicate codon {b1}{b2}{b3} in translation table")
        table[codon] = aa

    if len(table) != len(Base) ** 3:
        raise ValueError(
            f"Translation table covers {len(table)} codons, expected {len(Base) ** 3}"
        )
    return MappingProxyType(table)


# Standard genetic code
CODON_TABLE = build_codon_table(TRANSLATION_TABLE_SOURCE)

START_CODONS = frozenset({(Base.A, Base.T, Base.G)})
STOP_CODONS = frozenset(
    codon for codon, aa in CODON_TABLE.items() if aa == STOP_SYMBOL
)


def _check_frame(frame: int) -> None:
    if frame not in FRAMES:
        raise ValueError(f"Reading frame must be one of {FRAMES}, got {frame}")


def codons(sequence: Sequence[Base], frame: int = 0) -> List[Codon]:
    """
    Split a sequence into consecutive non-overlapping codons.

    The first `frame` bases are skipped and 1-2 trailing bases that do
    not complete a codon are dropped.
    """
    _check_frame(frame)
    return [
        (sequence[i], sequence[i + 1], sequence[i + 2])
        for i in range(frame, len(sequence) - 2, 3)
    ]


def translate_frame(sequence: Sequence[Base], frame: int = 0) -> str:
    """
    Translate a single reading frame.

    Example:
        >>> translate_frame(parse_sequence("ATGGCC"))
        'MA'
    """
    return "".join(CODON_TABLE[codon] for codon in codons(sequence, frame))


def translate(sequence: Sequence[Base]) -> List[str]:
    """
    Translate the three forward reading frames of a sequence.

    Example:
        AGGTGACACCGCAAGCCTTATATTAGC splits into
        Frame 0: AGG TGA CAC CGC AAG CCT TAT ATT AGC
        Frame 1: A GGT GAC ACC GCA AGC CTT ATA TTA GC
        Frame 2: AG GTG ACA CCG CAA GCC TTA TAT TAG C

        >>> translate(parse_sequence("AGGTGACACCGCAAGCCTTATATTAGC"))
        ['R*HRKPYIS', 'GDTASLIL', 'VTPQALY*']

    Returns:
        Protein strings for frames 0, 1 and 2
    """
    return [translate_frame(sequence, frame) for frame in FRAMES]


def all_codons() -> List[Codon]:
    """Every codon over the DNA alphabet, in declaration order."""
    return list(product(Base, repeat=3))
