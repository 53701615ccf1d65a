# tests/test_utils_logging.py

import logging
import pytest

pytest.importorskip("yaml")
from fragseq.utility.utils import setup_logging


def test_setup_logging_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv("FRAGSEQ_SESSION_ID", "rotate")
    monkeypatch.delenv("FRAGSEQ_LOG_FILE", raising=False)
    log_file = setup_logging(
            log_dir=tmp_path,
            force=True,
            console=False,
            max_bytes=1_000,
            backup_count=1,
            )
    root = logging.getLogger()
    # one file handler only
    assert len(root.handlers) == 1
    assert log_file.exists()
    # rollover works
    root.info("x" * 2_000) # exceed 1 kb
    root.handlers[0].flush()
    rotated = log_file.with_suffix(".log.1")
    assert rotated.exists()


def test_latest_symlink(tmp_path, monkeypatch):
    monkeypatch.setenv("FRAGSEQ_SESSION_ID", "linkme")
    monkeypatch.delenv("FRAGSEQ_LOG_FILE", raising=False)
    log_file = setup_logging(tmp_path, force=True, console=False)

    latest = tmp_path / "fragseq_latest.log"
    assert latest.is_symlink()
    assert latest.resolve() == log_file.resolve()


def test_no_reconfigure_without_force(tmp_path, monkeypatch):
    monkeypatch.setenv("FRAGSEQ_SESSION_ID", "keep")
    monkeypatch.delenv("FRAGSEQ_LOG_FILE", raising=False)
    setup_logging(tmp_path, force=True, console=False)
    handlers = list(logging.getLogger().handlers)

    setup_logging(tmp_path, console=True)
    assert logging.getLogger().handlers == handlers
