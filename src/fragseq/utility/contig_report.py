# --------- src/fragseq/utility/contig_report.py ----------------

from __future__ import annotations
from pathlib import Path
from typing import Iterable
import logging
import pandera as pa # dataframe validation library
import pandas as pd

from fragseq.assembly.fragment import Fragment
from fragseq.utility.fasta_io import contig_ids

L = logging.getLogger(__name__)
__all__ = ["COLS", "schema", "validate", "contig_table", "write_report"]

COLS = ["contig_id", "length", "gc_percent"]

schema = pa.DataFrameSchema(
    {
     "contig_id":  pa.Column(str, unique=True),
     "length":     pa.Column(int, pa.Check.ge(0)),
     "gc_percent": pa.Column(float, pa.Check.in_range(0.0, 100.0), coerce=True),
    }
)

def validate(df: pd.DataFrame) -> pd.DataFrame:
    """Raise SchemaErrors if columns or dtypes deviate; otherwise return df unchanged."""
    return schema.validate(df, lazy=True)

def _gc_percent(frag: Fragment) -> float:
    seq = str(frag)
    if not seq:
        return 0.0
    return 100.0 * (seq.count("G") + seq.count("C")) / len(seq)

def contig_table(fragments: Iterable[Fragment], *, prefix: str = "contig") -> pd.DataFrame:
    """One row per fragment: id, length and GC content."""
    fragments = list(fragments)
    df = pd.DataFrame(
        {
            "contig_id": contig_ids(len(fragments), prefix),
            "length": pd.Series([len(f) for f in fragments], dtype="int64"),
            "gc_percent": pd.Series([_gc_percent(f) for f in fragments], dtype="float64"),
        },
        columns=COLS,
    )
    return validate(df)

def write_report(fragments: Iterable[Fragment], out_tsv: str | Path, *, prefix: str = "contig") -> Path:
    out = Path(out_tsv)
    out.parent.mkdir(parents=True, exist_ok=True)
    df = contig_table(fragments, prefix=prefix)
    df.to_csv(out, sep="\t", index=False, float_format="%.2f")
    L.info("Contig report (%d rows) -> %s", len(df), out)
    return out
