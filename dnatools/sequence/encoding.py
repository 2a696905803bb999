"""
Numeric encodings of DNA sequences.

Bases are indexed in declaration order (A, T, C, G) so that the
vectorised sequence algorithms and the one-hot layout agree.
"""

import numpy as np
from typing import Dict, List, Sequence

from dnatools.bases import Base

BASE_INDEX: Dict[Base, int] = {base: i for i, base in enumerate(Base)}
INDEX_BASE: List[Base] = list(Base)
NUM_BASES = len(BASE_INDEX)


def base_indices(sequence: Sequence[Base]) -> np.ndarray:
    """
    Map a sequence of bases to a vector of integer indices.

    Example:
        >>> base_indices([Base.A, Base.G])
        array([0, 3])
    """
    return np.fromiter(
        (BASE_INDEX[base] for base in sequence),
        dtype=np.intp,
        count=len(sequence),
    )


def one_hot_encode(sequence: Sequence[Base]) -> np.ndarray:
    """
    One-hot encode a sequence of bases.

    Args:
        sequence: Sequence of Base values

    Returns:
        numpy array of shape (len(sequence), 4), columns ordered A, T, C, G

    Example:
        >>> one_hot_encode([Base.A, Base.C])
        array([[1., 0., 0., 0.],
               [0., 0., 1., 0.]], dtype=float32)
    """
    indices = base_indices(sequence)
    encoding = np.zeros((len(indices), NUM_BASES), dtype=np.float32)
    encoding[np.arange(len(indices)), indices] = 1.0
    return encoding


def one_hot_decode(encoding: np.ndarray) -> List[Base]:
    """
    Decode a one-hot (or soft) encoding back to bases.

    Each row is decoded to the base with the highest value.
    """
    encoding = np.asarray(encoding)
    if encoding.ndim != 2 or encoding.shape[1] != NUM_BASES:
        raise ValueError(
            f"Expected encoding of shape (n, {NUM_BASES}), got {encoding.shape}"
        )
    return [INDEX_BASE[i] for i in np.argmax(encoding, axis=1)]
