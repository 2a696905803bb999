"""
Nucleobase model and parsing.

The DNA alphabet is closed: A, T, C and G. Parsing comes in two tiers:
- try_* functions return None on invalid input
- parse* functions raise InvalidBaseError
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence


class Base(Enum):
    """One of the four canonical DNA nucleobases."""
    A = "A"
    T = "T"
    C = "C"
    G = "G"

    @property
    def complement(self) -> "Base":
        """Watson-Crick partner (A<->T, C<->G)."""
        return _COMPLEMENT[self]

    def __repr__(self) -> str:
        return self.value


_COMPLEMENT: Dict[Base, Base] = {
    Base.A: Base.T,
    Base.T: Base.A,
    Base.C: Base.G,
    Base.G: Base.C,
}

_BY_CHAR: Dict[str, Base] = {base.value: base for base in Base}


class InvalidBaseError(ValueError):
    """
    Raised when a character is not a valid nucleobase.

    Attributes:
        char: The offending character
        position: Index of the character in the parsed string, or None
            when a single character was parsed
    """

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        self.position = position
        if position is None:
            message = f"Invalid nucleobase {char!r}"
        else:
            message = f"Invalid nucleobase {char!r} at position {position}"
        super().__init__(message)


def try_parse(char: str) -> Optional[Base]:
    """
    Parse a single character as a nucleobase.

    Args:
        char: One of 'A', 'T', 'C', 'G' (uppercase only)

    Returns:
        The matching Base, or None for any other input

    Example:
        >>> try_parse("G")
        G
        >>> try_parse("B") is None
        True
    """
    return _BY_CHAR.get(char)


def parse(char: str) -> Base:
    """
    Parse a single character as a nucleobase.

    Raises:
        InvalidBaseError: If char is not one of 'A', 'T', 'C', 'G'
    """
    base = try_parse(char)
    if base is None:
        raise InvalidBaseError(char)
    return base


def try_parse_sequence(text: str) -> Optional[List[Base]]:
    """
    Parse a DNA string into a list of bases.

    Parsing stops at the first invalid character and the whole result
    is discarded.

    Example:
        >>> try_parse_sequence("ATCG")
        [A, T, C, G]
        >>> try_parse_sequence("ATXG") is None
        True
    """
    sequence = []
    for char in text:
        base = try_parse(char)
        if base is None:
            return None
        sequence.append(base)
    return sequence


def parse_sequence(text: str) -> List[Base]:
    """
    Parse a DNA string into a list of bases.

    Raises:
        InvalidBaseError: On the first invalid character, with its position
    """
    sequence = []
    for i, char in enumerate(text):
        base = try_parse(char)
        if base is None:
            raise InvalidBaseError(char, position=i)
        sequence.append(base)
    return sequence


def format_sequence(sequence: Sequence[Base]) -> str:
    """Render a sequence of bases as its one-letter string."""
    return "".join(base.value for base in sequence)
