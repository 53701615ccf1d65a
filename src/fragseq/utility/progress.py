# src/fragseq/utility/progress.py

from __future__ import annotations
from contextlib import contextmanager
from tqdm import tqdm
from typing import Iterator
import threading

_tls = threading.local()  # module-level, one per thread

@contextmanager
def stage_bar(total: int, *, desc: str = "", unit: str = "") -> Iterator[tqdm]:
    """
    Yield a tqdm bar and remember it in a thread-local so a nested stage_bar
    restores its parent once it closes.
    """
    outer = getattr(_tls, "current", None)
    bar = tqdm(total=total, desc=desc, unit=unit, leave=False, ncols=80, bar_format=("{l_bar}{bar}| " "{n_fmt}/{total_fmt} " "[elapsed: {elapsed} < remaining: {remaining}]"),) # leave=False so a finished bar disappears
    _tls.current = bar

    try:
        yield bar
    finally:
        bar.close()
        _tls.current = outer # restore parent (or None)
