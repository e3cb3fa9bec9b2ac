# src/utils.py
# Contains reusable helpers: logging setup, name collation and the operation logger.

from collections import defaultdict
import logging
import os
import re
import time
import unicodedata
import uuid
from config import LOG_FILE, LOG_LEVEL
from typing import Dict, List, Optional, Tuple


def setup_logging():

    # DEBUG: Detailed logs for development and debugging.
    # INFO: High-level events (like app startup, task completion).
    # WARNING: Non-critical issues that should be looked at.
    # ERROR: Serious issues that affect functionality but the app can continue.

    # Create log directory if not exists (derive from LOG_FILE)
    log_dir = os.path.dirname(os.path.abspath(LOG_FILE))
    os.makedirs(log_dir, exist_ok=True)

    # Clear any existing handlers to avoid duplicates
    logging.getLogger().handlers = []

    file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8', mode='a')
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(filename)-28.28s%(lineno)-5d%(funcName)-28.28s: %(message)s',
        datefmt='%b %d %a] [%H:%M:%S'
    ))

    logging.getLogger().addHandler(file_handler)
    logging.getLogger().setLevel(LOG_LEVEL)

    logging.info(f"Logging configured to {LOG_FILE} at level {LOG_LEVEL}")


def normalize_key(name: str) -> str:
    """
    Fold a player name for comparison: collapse whitespace, lower-case, strip accents.

    Examples
    --------
    "Медведь"           -> "медведь"
    "Élodie  Roux"      -> "elodie roux"
    """
    s = re.sub(r"\s+", " ", name.strip()).lower()
    decomp = unicodedata.normalize("NFKD", s)
    return "".join(c for c in decomp if not unicodedata.combining(c))


def collation_key(name: str) -> Tuple[str, str, str]:
    """
    Sort key approximating a locale-aware comparison:
    base letters first, then accents, then case (lower case first).
    """
    return (normalize_key(name), name.casefold(), name.swapcase())


class OperationLogger:
    """
    Tracks success, failed and warning outcomes of a pipeline run, counted by reason.

    Usage:
      logger = OperationLogger(verbosity=2, print_output=False)
      logger.success({'tournament_id': '740'}, 'Page fetched')
      logger.failed({'tournament_id': '740'}, 'Page fetch failed')
      logger.summarize()

    verbosity:
        0: Summary totals only.
        1: Totals + reason breakdowns, failures in the log file (default).
        2: Level 1 + warnings in the log file.
        3: Level 2 + every success in the log file.
    """
    def __init__(
        self,
        verbosity:      int = 1,
        print_output:   bool = True,
        run_id:         Optional[str] = None
    ):
        self.run_id             = run_id or str(uuid.uuid4())
        self.verbosity          = verbosity
        self.print_output       = print_output
        self.reasons            = {"success": defaultdict(int), "failed": defaultdict(int), "warning": defaultdict(int)}
        self.processed          = 0
        self.start_time         = time.time()

    def inc_processed(self, n: int = 1):
        self.processed += n

    def _format_msg(self, context: Dict, reason: str) -> str:
        return f"({', '.join(f'{k}: {v}' for k,v in context.items())}): {reason}"

    def info(self, context: Dict, reason: str, *, to_console: Optional[bool] = None):
        """Log an informational line; does not affect counters."""
        msg = self._format_msg(context, reason)
        logging.info(msg, stacklevel=2)

        should_print = self.print_output if to_console is None else to_console
        if should_print:
            print(f"ℹ️  {msg}")

    def success(self, context: Dict, reason: str = "Success"):
        self.reasons["success"][reason] += 1
        if self.verbosity >= 3:
            logging.info(self._format_msg(context, reason), stacklevel=2)

    def failed(self, context: Dict, reason: str = "Failed"):
        self.reasons["failed"][reason] += 1
        if self.verbosity >= 1:
            logging.error(self._format_msg(context, reason), stacklevel=2)

    def warning(self, context: Dict, reason: str):
        self.reasons["warning"][reason] += 1
        if self.verbosity >= 2:
            logging.warning(self._format_msg(context, reason), stacklevel=2)

    def summarize(self) -> List[str]:
        """Print/log the run summary one line at a time and return the lines."""
        lines = ["📊 Operation Summary:"]
        for label, emoji, status in [
            ("Success",  "✅",  "success"),
            ("Failed",   "❌",  "failed"),
            ("Warnings", "⚠️ ", "warning"),
        ]:
            lines.append(f"   {emoji} {label}: {sum(self.reasons[status].values())}")
            if self.verbosity >= 1:
                for reason, count in self.reasons[status].items():
                    lines.append(f"      • {reason}: {count}")

        runtime_seconds = time.time() - self.start_time
        lines.append("")
        lines.append(f"   ⏱️  Runtime: {runtime_seconds:.1f}s")
        lines.append(f"   📦 Records processed: {self.processed}")
        if runtime_seconds > 0:
            lines.append(f"   ⚡ Throughput: {self.processed / runtime_seconds:.1f} records/sec")

        for line in lines:
            logging.info(line, stacklevel=2)
            if self.print_output:
                print(line)
        return lines
