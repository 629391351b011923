"""
logger.py - Per-component rotating log files.

Each component gets its own log file in the log directory
(CONFIG_FS_LOG_DIR, default ~/.config-fs-utils/logs).
Files rotate at 1MB, keeping 3 old copies.

Usage:
    from config_fs_utils.shared.logger import create_logger
    log = create_logger("file-operations")
    log.info("Wrote /home/me/.config/mutt/muttrc")
    log.error("Permission denied: /etc/app.ini")
"""
import os
import sys
import datetime

from config_fs_utils.shared.configuration_paths import get_log_dir

MAX_LOG_SIZE = 1_000_000  # 1MB
MAX_ROTATIONS = 3


def _rotate_if_needed(log_path):
    """Rotate log file if it exceeds MAX_LOG_SIZE."""
    if not os.path.exists(log_path):
        return
    if os.path.getsize(log_path) < MAX_LOG_SIZE:
        return
    # Rotate: .log.3 -> delete, .log.2 -> .log.3, .log.1 -> .log.2, .log -> .log.1
    for i in range(MAX_ROTATIONS, 0, -1):
        old = f"{log_path}.{i}"
        new = f"{log_path}.{i + 1}" if i < MAX_ROTATIONS else None
        if os.path.exists(old):
            if new:
                os.replace(old, new)
            else:
                os.remove(old)
    os.replace(log_path, f"{log_path}.1")


class Logger:
    def __init__(self, component_name):
        self.component_name = component_name

    @property
    def log_path(self):
        # Resolved per write so a changed CONFIG_FS_LOG_DIR takes effect
        return os.path.join(get_log_dir(), f"{self.component_name}.log")

    def _write(self, level, message):
        log_path = self.log_path
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} [{level}] [{self.component_name}] {message}\n"
        # A broken log directory must not fail the operation being logged
        try:
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
            _rotate_if_needed(log_path)
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            sys.stderr.write(f"config-fs: could not write log {log_path}: {e}\n")

    def info(self, message):
        self._write("INFO", message)

    def warn(self, message):
        self._write("WARN", message)

    def error(self, message):
        self._write("ERROR", message)

    def debug(self, message):
        self._write("DEBUG", message)


def create_logger(component_name):
    """Create a logger for one component. Logs to <log dir>/{name}.log"""
    return Logger(component_name)
