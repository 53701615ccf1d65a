# src/fragseq/assembly/fragment.py

"""
A Fragment is one short read (a run of nucleotides) that we want to stitch back together with its neighbours.
Fragments are immutable values so two fragments holding the same letters are equal and hash the same,
no matter where they came from (loader or a previous merge).
"""

from __future__ import annotations # Postpones evaluation of type annotations (PEP 563)
from dataclasses import dataclass

__all__ = ["ALPHABET", "Fragment", "InvalidAlphabetError"]

# Only uppercase bases are accepted, no case folding happens on the way in
ALPHABET = frozenset("ACGT")


class InvalidAlphabetError(ValueError):
    """Raised when a sequence contains a symbol outside A, C, G, T."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Invalid character in nucleotides: {symbol!r} at position {position}")


@dataclass(frozen=True)
class Fragment:
    """Immutable, validated nucleotide sequence."""

    nucleotides: str = ""

    def __post_init__(self) -> None:
        # fail on the first bad symbol so the caller knows exactly what to fix
        for pos, base in enumerate(self.nucleotides):
            if base not in ALPHABET:
                raise InvalidAlphabetError(base, pos)

    def __str__(self) -> str:
        return self.nucleotides

    def __len__(self) -> int:
        return len(self.nucleotides)

    def length(self) -> int:
        return len(self.nucleotides)

    def calculate_overlap(self, other: Fragment) -> int:
        """
        Number of bases shared between the end of this fragment and the start of other.

        The largest overlap wins, e.g. CAA and AAG overlap by 2, not 1.
        Direction matters: a.calculate_overlap(b) can differ from b.calculate_overlap(a).
        """
        best = 0
        min_len = min(len(self), len(other))
        # ascending scan, keep overwriting so the last (largest) hit is the one returned
        for k in range(1, min_len + 1):
            if self.nucleotides[-k:] == other.nucleotides[:k]:
                best = k
        return best

    def merged_with(self, other: Fragment) -> Fragment:
        """
        Return a new Fragment with this fragment on the left and other on the right,
        overlapped as much as possible. No overlap means plain concatenation.
        """
        k = self.calculate_overlap(other)
        if k == 0:
            return Fragment(self.nucleotides + other.nucleotides)

        if self.nucleotides.endswith(other.nucleotides[:k]):
            return Fragment(self.nucleotides + other.nucleotides[k:])
        # overlap only lines up the other way round
        return Fragment(other.nucleotides + self.nucleotides[k:])
