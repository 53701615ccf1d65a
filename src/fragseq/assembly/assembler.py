# src/fragseq/assembly/assembler.py

"""
Greedy overlap assembler.

Each round scans every ordered pair of fragments, picks the pair with the biggest
suffix/prefix overlap and swaps those two fragments for their merge. Rounds repeat
until one fragment is left or nothing overlaps anymore.
"""

from __future__ import annotations
import logging
from typing import Iterable, NamedTuple

from .fragment import Fragment

__all__ = ["Assembler", "MergeCandidate"]

L = logging.getLogger(__name__)


class MergeCandidate(NamedTuple):
    """Best pair found by one scan: fragments[left_index] is merged with fragments[right_index]."""
    left_index: int
    right_index: int
    overlap: int


class Assembler:
    """Holds its own list of fragments and merges them greedily."""

    def __init__(self, fragments: Iterable[Fragment], *, min_overlap: int = 1):
        if min_overlap < 1:
            raise ValueError(f"min_overlap must be at least 1, got {min_overlap}")
        # Fragments are immutable so copying the list is enough to keep the caller's list untouched
        self._fragments: list[Fragment] = list(fragments)
        self.min_overlap = min_overlap

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fragments={len(self._fragments)}, min_overlap={self.min_overlap})"

    def get_fragments(self) -> list[Fragment]:
        """Return the current fragments (a copy, edits do not reach the assembler)."""
        return list(self._fragments)

    def find_best_merge(self) -> MergeCandidate | None:
        """
        Scan every ordered pair (i, j), i != j, and return the best one.

        Best means the largest overlap; ties go to the pair whose right fragment is
        shorter. Among exact ties the first pair seen (i, then j ascending) is kept.
        Returns None when there are fewer than two fragments.
        """
        best: MergeCandidate | None = None
        best_right_len = 0

        for i, left in enumerate(self._fragments):
            for j, right in enumerate(self._fragments):
                if i == j:
                    continue
                overlap = left.calculate_overlap(right)
                if (
                    best is None
                    or overlap > best.overlap
                    or (overlap == best.overlap and len(right) < best_right_len)
                ):
                    best = MergeCandidate(i, j, overlap)
                    best_right_len = len(right)

        return best

    def is_reducible(self) -> bool:
        best = self.find_best_merge()
        return best is not None and best.overlap >= self.min_overlap

    def assemble_once(self) -> bool:
        """
        Perform the single best merge, if any.

        Returns True iff two fragments were replaced by their merge.
        """
        best = self.find_best_merge()
        if best is None or best.overlap < self.min_overlap:
            return False

        left = self._fragments[best.left_index]
        right = self._fragments[best.right_index]
        merged = left.merged_with(right)

        # drop the higher index first so the lower one does not shift
        hi, lo = max(best.left_index, best.right_index), min(best.left_index, best.right_index)
        del self._fragments[hi]
        del self._fragments[lo]
        self._fragments.insert(lo, merged)

        L.debug(
            "merged #%d (len %d) + #%d (len %d) overlap=%d -> len %d; %d fragments left",
            best.left_index, len(left), best.right_index, len(right),
            best.overlap, len(merged), len(self._fragments),
        )
        return True

    def assemble_all(self) -> int:
        """
        Merge until no merge is possible. Returns the number of merges performed,
        so calling it again on a finished assembler returns 0.
        """
        merges = 0
        while self.assemble_once():
            merges += 1

        L.info("Assembly finished after %d merge(s); %d fragment(s) remain", merges, len(self._fragments))
        return merges
