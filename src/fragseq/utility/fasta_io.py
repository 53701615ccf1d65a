# src/fragseq/utility/fasta_io.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from fragseq.assembly.fragment import Fragment, InvalidAlphabetError

L = logging.getLogger(__name__)
__all__ = ["read_fragments", "write_fragments", "contig_ids"]


def read_fragments(fasta: str | Path) -> list[Fragment]:
    """Load every record of ``fasta`` as a Fragment, in file order.

    Sequences are taken verbatim (no upper-casing). A record with a base outside
    A/C/G/T is logged with its id and the InvalidAlphabetError is re-raised.
    """
    fasta = Path(fasta)
    if not fasta.exists():
        raise FileNotFoundError(fasta)

    fragments: list[Fragment] = []
    for record in SeqIO.parse(fasta, "fasta"):
        try:
            fragments.append(Fragment(str(record.seq)))
        except InvalidAlphabetError as exc:
            L.error("Record %s in %s rejected: %s", record.id, fasta.name, exc)
            raise

    L.info("Loaded %d fragment(s) from %s", len(fragments), fasta)
    return fragments


def contig_ids(count: int, prefix: str = "contig") -> list[str]:
    """contig_1 .. contig_<count>"""
    return [f"{prefix}_{idx}" for idx in range(1, count + 1)]


def write_fragments(fragments: Iterable[Fragment], out_fa: str | Path, *, prefix: str = "contig") -> Path:
    """Write ``fragments`` to ``out_fa`` as FASTA, one record per fragment."""
    fragments = list(fragments)
    out_fa = Path(out_fa)
    out_fa.parent.mkdir(parents=True, exist_ok=True)

    records = [
        SeqRecord(Seq(str(frag)), id=rid, description=f"length={len(frag)}")
        for rid, frag in zip(contig_ids(len(fragments), prefix), fragments)
    ]
    SeqIO.write(records, out_fa, "fasta")
    L.info("Wrote %d contig(s) to %s", len(records), out_fa)
    return out_fa
