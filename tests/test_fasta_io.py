from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("Bio")
from Bio import SeqIO

from fragseq.assembly.fragment import Fragment, InvalidAlphabetError
from fragseq.utility.fasta_io import contig_ids, read_fragments, write_fragments


def test_read_fragments_keeps_file_order(tmp_path: Path):
    fa = tmp_path / "reads.fasta"
    fa.write_text(">r1\nATTAGC\n>r2\nTAGCA\n>r3\nGC\nAT\n", encoding="utf-8")

    # multi-line records are joined by SeqIO
    assert read_fragments(fa) == [Fragment("ATTAGC"), Fragment("TAGCA"), Fragment("GCAT")]


def test_read_fragments_empty_file(tmp_path: Path):
    fa = tmp_path / "empty.fasta"
    fa.write_text("", encoding="utf-8")
    assert read_fragments(fa) == []


def test_read_fragments_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_fragments(tmp_path / "nope.fasta")


def test_invalid_record_is_surfaced_and_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    fa = tmp_path / "bad.fasta"
    fa.write_text(">ok\nACGT\n>rna_read\nACGU\n", encoding="utf-8")

    with pytest.raises(InvalidAlphabetError):
        read_fragments(fa)
    # the record id ends up in the log so the user can find it
    assert "rna_read" in caplog.text


def test_lowercase_reads_are_not_upcased(tmp_path: Path):
    fa = tmp_path / "lower.fasta"
    fa.write_text(">r1\nacgt\n", encoding="utf-8")
    with pytest.raises(InvalidAlphabetError):
        read_fragments(fa)


def test_write_fragments(tmp_path: Path):
    out = tmp_path / "nested" / "contigs.fasta"
    written = write_fragments([Fragment("ATTAGCAT"), Fragment("GGG")], out)

    assert written == out
    records = list(SeqIO.parse(out, "fasta"))
    assert [r.id for r in records] == ["contig_1", "contig_2"]
    assert [str(r.seq) for r in records] == ["ATTAGCAT", "GGG"]
    assert "length=8" in records[0].description


def test_write_then_read_back(tmp_path: Path):
    out = tmp_path / "contigs.fasta"
    frags = [Fragment("ACGT"), Fragment("TTTT")]
    write_fragments(frags, out, prefix="scaf")
    assert read_fragments(out) == frags
    assert next(SeqIO.parse(out, "fasta")).id == "scaf_1"


def test_contig_ids():
    assert contig_ids(3, "c") == ["c_1", "c_2", "c_3"]
    assert contig_ids(0) == []
