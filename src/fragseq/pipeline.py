"""
fragseq.pipeline
Thin wrapper that runs FASTA in -> greedy assembly -> contigs FASTA (+ TSV report) out.
Returns an int exit-code (0 = success) & raises on fatal errors.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from fragseq.assembly.assembler import Assembler
from fragseq.utility import progress as pg # module attribute lookup so tests can monkeypatch stage_bar
from fragseq.utility.contig_report import write_report
from fragseq.utility.fasta_io import read_fragments, write_fragments
from fragseq.utility.utils import config_value, load_config

__all__ = ["run_assembly"]

PathLike = Union[str, Path]
L = logging.getLogger(__name__)


def _tick_safe(bar, inc: int = 1) -> None:
    """Call bar.update(inc) only if the bar has one."""
    if hasattr(bar, "update"):
        bar.update(inc)


# ───────────────────────────────────────────────────────── assembly
def run_assembly(
    input_fasta: PathLike,
    output_fasta: PathLike,
    *,
    min_overlap: int | None = None,
    report_tsv: PathLike | None = None,
    prefix: str | None = None,
) -> int:
    """Assemble the reads in *input_fasta* and write the contigs to *output_fasta*.

    ``min_overlap`` and ``prefix`` default to the ``assembly`` section of
    config.yaml. When *report_tsv* is given, a per-contig length/GC table is
    written there as well.

    Returns 0 on success.
    """
    cfg = load_config()
    if min_overlap is None:
        min_overlap = int(config_value(cfg, "assembly", "min_overlap"))
    if prefix is None:
        prefix = str(config_value(cfg, "assembly", "contig_prefix"))

    fragments = read_fragments(input_fasta)
    asm = Assembler(fragments, min_overlap=min_overlap)

    merges = 0
    # worst case is n-1 merges, the bar just stops short when reads do not overlap
    with pg.stage_bar(max(len(fragments) - 1, 0), desc="assemble", unit="merge") as bar:
        while asm.assemble_once():
            merges += 1
            _tick_safe(bar)

    contigs = asm.get_fragments()
    write_fragments(contigs, output_fasta, prefix=prefix)
    if report_tsv:
        write_report(contigs, report_tsv, prefix=prefix)

    longest = max((len(c) for c in contigs), default=0)
    L.info(
        "Assembly finished → %s (%d read(s), %d merge(s), %d contig(s), longest %d bp)",
        output_fasta, len(fragments), merges, len(contigs), longest,
    )
    return 0
