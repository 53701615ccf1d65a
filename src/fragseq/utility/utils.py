# ── src/fragseq/utility/utils.py ───────────────────────────────────────
from __future__ import annotations

import errno
import logging
import logging.handlers
import os
import secrets
import sys
import yaml
from pathlib import Path
import datetime as dt

# ── locate repo root & default log dir  ────────────────────────────────
def _find_repo_root(start: Path | None = None) -> Path:
    """Walk parents until we see pyproject.toml or .git."""
    here = start or Path(__file__).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path(__file__).resolve().parents[1]       # site-packages wheel

ROOT      = _find_repo_root()
LOG_ROOT  = ROOT / "logs"
CONF_PATH = ROOT / "config" / "config.yaml"

# built-in fallbacks when the yaml leaves a key out
DEFAULTS = {
    "assembly": {"min_overlap": 1, "contig_prefix": "contig"},
}

# ── tiny helpers  ──────────────────────────────────────────────────────
def load_config(path: str | Path | None = None) -> dict:
    """
    Read the YAML config. $FRAGSEQ_CONFIG beats the repo default config/config.yaml.
    A missing default file just gives back an empty dict, a missing explicit path raises.
    """
    if path is None:
        env = os.getenv("FRAGSEQ_CONFIG")
        path = Path(env).expanduser() if env else CONF_PATH
        if not env and not Path(path).exists():
            return {}
    with Path(path).open() as fh:
        return yaml.safe_load(fh) or {}

def config_value(cfg: dict, section: str, key: str):
    """Look up cfg[section][key] falling back to DEFAULTS."""
    return (cfg.get(section) or {}).get(key, DEFAULTS[section][key])

# ── main helper  ───────────────────────────────────────────────────────
def setup_logging(
    log_dir: str | Path | None = None,
    *,
    level: int | None = None,
    console: bool = True,
    force: bool = False,
    rotate_mb: int | None = None,
    max_bytes: int | None = None,
    backup_count: int = 0,                      # keep everything by default
    session_env: str = "FRAGSEQ_SESSION_ID",
    warn_if_generated: bool = True,
    log_file_prefix: str = "fragseq",
) -> Path:
    """
    Create one log file called 'fragseq_<SESSION_ID>.log'.

    SESSION_ID priority
    1. value of $<session_env>  (e.g. FRAGSEQ_SESSION_ID)
    2. auto-generated 'YYYYMMDD-HHMMSS-<4-hex>'

    Log dir priority: $FRAGSEQ_LOG_FILE, then log_dir, then $FRAGSEQ_LOG_DIR, then <repo>/logs.
    Only auto-generated (timestamp-rand) files are ever pruned, and only when backup_count > 0.
    """

    # ── size-rotation helper ------------------------------------------
    if max_bytes:
        rotate_bytes = max_bytes
    elif rotate_mb:
        rotate_bytes = int(rotate_mb * 1024 * 1024)
    else:
        rotate_bytes = None

    # ── decide root dir (env file beats arg beats env dir beats default) --
    if os.getenv("FRAGSEQ_LOG_FILE"):
        logfile = Path(os.getenv("FRAGSEQ_LOG_FILE")).expanduser()
        logfile.parent.mkdir(parents=True, exist_ok=True)
    else:
        root_dir = (
            Path(log_dir).expanduser()
            if log_dir is not None
            else Path(os.getenv("FRAGSEQ_LOG_DIR", LOG_ROOT)).expanduser()
        )
        root_dir.mkdir(parents=True, exist_ok=True)

        # ── choose session ID -----------------------------------------
        sess_id = os.getenv(session_env)
        if not sess_id:
            ts = dt.datetime.now().strftime("%Y%m%d-%H%M%S")
            sess_id = f"{ts}-{secrets.token_hex(2)}"
            if warn_if_generated:
                sys.stderr.write(
                    f"⚠️  {session_env} not set – using auto session ID {sess_id}\n"
                    f"   (export {session_env}=YOUR_ID to aggregate multiple commands)\n"
                )

        # ── prune old auto logs --------------------------------------
        is_auto = sess_id.count("-") == 2         # timestamp-rand pattern
        if is_auto and backup_count:
            patt  = f"{log_file_prefix}_????????-??????-*.log"
            logs  = sorted(root_dir.glob(patt))   # oldest → newest
            excess = len(logs) - backup_count
            for old in logs[:excess]:
                try:
                    old.unlink()
                except FileNotFoundError:
                    pass

        logfile = root_dir / f"{log_file_prefix}_{sess_id}.log"

    # ── short-circuit if already configured ---------------------------
    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return logfile

    root_logger.handlers.clear()
    root_logger.setLevel(level or logging.INFO)

    fmt = logging.Formatter("%(asctime)s  %(levelname)-7s  %(name)s:  %(message)s")

    # ── choose handler -------------------------------------------------
    if rotate_bytes:
        fh = logging.handlers.RotatingFileHandler(
            logfile, maxBytes=rotate_bytes, backupCount=backup_count,
            encoding="utf-8", delay=True
        )
    else:
        fh = logging.FileHandler(logfile, mode="a", encoding="utf-8", delay=True)

    fh.setFormatter(fmt)
    root_logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        root_logger.addHandler(ch)

    # ── refresh _latest symlink ---------------------------------------
    latest = logfile.parent / f"{log_file_prefix}_latest.log"
    try:
        if latest.is_symlink() or latest.exists():
            latest.unlink()
        latest.symlink_to(logfile.name)          # relative link
    except OSError as e:
        if e.errno not in (errno.EPERM, errno.EACCES, errno.EEXIST):
            raise

    root_logger.info("Logging to %s", logfile)
    return logfile
