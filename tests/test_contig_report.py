# ------- tests/test_contig_report.py -------------

from __future__ import annotations

from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")
pa = pytest.importorskip("pandera")

from fragseq.assembly.fragment import Fragment
from fragseq.utility.contig_report import COLS, contig_table, validate, write_report


def test_contig_table_columns_and_values():
    df = contig_table([Fragment("GGCC"), Fragment("ATAT"), Fragment("ACGT")])
    assert list(df.columns) == COLS
    assert df["contig_id"].tolist() == ["contig_1", "contig_2", "contig_3"]
    assert df["length"].tolist() == [4, 4, 4]
    assert df["gc_percent"].tolist() == pytest.approx([100.0, 0.0, 50.0])


def test_empty_fragment_has_zero_gc():
    df = contig_table([Fragment("")])
    assert df.loc[0, "length"] == 0
    assert df.loc[0, "gc_percent"] == 0.0


def test_validate_rejects_negative_length():
    bad = pd.DataFrame({"contig_id": ["c1"], "length": [-1], "gc_percent": [10.0]})
    with pytest.raises((pa.errors.SchemaError, pa.errors.SchemaErrors)):
        validate(bad)


def test_validate_rejects_duplicate_ids():
    bad = pd.DataFrame({"contig_id": ["c1", "c1"], "length": [1, 2], "gc_percent": [0.0, 50.0]})
    with pytest.raises((pa.errors.SchemaError, pa.errors.SchemaErrors)):
        validate(bad)


def test_write_report(tmp_path: Path):
    out = write_report([Fragment("ATTAGCAT")], tmp_path / "rep" / "contigs.tsv", prefix="ctg")
    df = pd.read_csv(out, sep="\t")
    assert df.to_dict("records") == [{"contig_id": "ctg_1", "length": 8, "gc_percent": 25.0}]
