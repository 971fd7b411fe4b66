# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.operational_support import TraceIdLogFilter
from infra.path import user_data_dir
from infra.version import get_app_version


def setup_logging(log_dir: Path | None = None, level: int = logging.INFO) -> Path:
    """
    Configure root logging: rotating file under the data directory plus console.
    Returns the log file path.
    """
    log_dir = Path(log_dir) if log_dir is not None else user_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "finance.log"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # 1 MB per file
        backupCount=5,
        encoding="utf-8",
    )
    trace_filter = TraceIdLogFilter()
    file_handler.addFilter(trace_filter)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s")
    )
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.addFilter(trace_filter)
    console.setFormatter(logging.Formatter("%(levelname)s [trace=%(trace_id)s]: %(message)s"))
    logger.addHandler(console)

    logger.info("Logging initialized (version %s). Log file at %s", get_app_version(), log_file)
    return log_file


__all__ = ["setup_logging"]
