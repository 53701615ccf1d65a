"""Greedy overlap assembly exposed for external callers."""

from .fragment import ALPHABET, Fragment, InvalidAlphabetError
from .assembler import Assembler, MergeCandidate

__all__ = ["ALPHABET", "Fragment", "InvalidAlphabetError", "Assembler", "MergeCandidate"]
