"""
file_operations.py - Directory creation, backup-before-overwrite, and safe config file writes.

Backups are copies, never moves: the original stays in place and the backup sits beside it
with a timestamp suffix. Example: muttrc -> muttrc.backup-2026-02-14T19-55-00-123456Z
Backups are never deleted by this module.

Writes are truncate-and-write, not atomic. Batch operations stop at the first failure and
leave earlier results in place (no rollback). Every OSError propagates to the caller.
"""
import os
import shutil
import datetime
from types import MappingProxyType
from dataclasses import dataclass, asdict
from enum import Enum

from config_fs_utils.shared.configuration_paths import expand_home
from config_fs_utils.shared.logger import create_logger

log = create_logger("file-operations")

BACKUP_MARKER = ".backup-"

# Defaults for write_config_files(); caller keywords override per key
CONFIG_FILE_DEFAULTS = MappingProxyType({
    "backup": True,
    "permissions": 0o600,
})


class WriteStatus(str, Enum):
    CREATED = "created"
    OVERWRITTEN_WITH_BACKUP = "overwritten-with-backup"
    OVERWRITTEN_NO_BACKUP = "overwritten-no-backup"


@dataclass
class WriteResult:
    """
    Outcome of one write_file() call.

    created is True whenever no backup was made. It only means "new file" when
    backup was requested: without backup, overwrites also report created=True.
    Use existed/status for an exact answer.
    """
    path: str
    backup: str | None = None
    created: bool = True
    existed: bool = False

    @property
    def status(self):
        if not self.existed:
            return WriteStatus.CREATED
        if self.backup is not None:
            return WriteStatus.OVERWRITTEN_WITH_BACKUP
        return WriteStatus.OVERWRITTEN_NO_BACKUP

    def to_dict(self):
        data = asdict(self)
        data["status"] = self.status.value
        return data


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

def ensure_directory(dir_path):
    """
    Create directory and parents if they don't exist. Returns the expanded path.
    Raises FileExistsError / NotADirectoryError if a path component is a file.
    """
    expanded = expand_home(dir_path)
    os.makedirs(expanded, exist_ok=True)
    log.debug(f"Ensured directory: {expanded}")
    return expanded


def ensure_directories(dir_paths):
    """
    Ensure each directory in order. Returns the expanded paths.
    A failure stops the loop; directories already created are left in place.
    """
    created = []
    for dir_path in dir_paths:
        created.append(ensure_directory(dir_path))
    return created


# ---------------------------------------------------------------------------
# Backups
# ---------------------------------------------------------------------------

def _backup_timestamp():
    """UTC ISO-8601 timestamp with ':' and '.' replaced: 2026-02-14T19-55-00-123456Z"""
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.%fZ").replace(":", "-").replace(".", "-")


def backup_file(file_path):
    """
    Copy a file to <file>.backup-<timestamp> beside it.
    Returns the backup path, or None if the file doesn't exist.
    Raises FileExistsError if a backup with the same timestamp already exists.
    """
    source = expand_home(file_path)
    if not os.path.exists(source):
        return None

    backup_path = f"{source}{BACKUP_MARKER}{_backup_timestamp()}"
    mode = os.stat(source).st_mode & 0o777
    # O_EXCL: never overwrite an earlier backup; created with the source's mode
    fd = os.open(backup_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    try:
        with os.fdopen(fd, "wb") as dst, open(source, "rb") as src:
            shutil.copyfileobj(src, dst)
        shutil.copymode(source, backup_path)
    except BaseException:
        # A partial copy must not be left behind under a backup name
        os.unlink(backup_path)
        raise

    log.info(f"Backed up {source} -> {backup_path}")
    return backup_path


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def write_file(file_path, content, *, backup=False, permissions=None, encoding="utf-8"):
    """
    Write content to a file, replacing what was there.

    Steps (any failure stops the rest):
      1. expand ~
      2. create the parent directory
      3. back up the existing file (backup=True only)
      4. write content
      5. chmod to exactly `permissions` (when given)
    """
    expanded = expand_home(file_path)
    ensure_directory(os.path.dirname(expanded) or os.curdir)

    existed = os.path.exists(expanded)
    backup_path = backup_file(expanded) if backup else None

    with open(expanded, "w", encoding=encoding, newline="") as f:
        f.write(content)

    if permissions is not None:
        os.chmod(expanded, permissions)

    result = WriteResult(
        path=expanded,
        backup=backup_path,
        created=backup_path is None,
        existed=existed,
    )
    mode_note = f" mode={permissions:o}" if permissions is not None else ""
    log.info(f"Wrote {expanded} ({result.status.value}){mode_note}")
    return result


def write_files(files, *, backup=False, permissions=None, encoding="utf-8"):
    """
    Write a {path: content} mapping in insertion order. Returns one WriteResult per file.
    A failure stops the loop; files already written are not rolled back.
    """
    results = []
    for file_path, content in files.items():
        results.append(write_file(
            file_path, content, backup=backup, permissions=permissions, encoding=encoding,
        ))
    return results


def write_config_files(files, **options):
    """
    write_files() with config defaults: backup=True, permissions=0o600.
    Keywords override defaults one at a time, e.g. permissions=0o644 keeps backup=True.
    permissions=None skips chmod.
    """
    merged = {**CONFIG_FILE_DEFAULTS, **options}
    return write_files(files, **merged)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def exists(path):
    """True if a file or directory exists at path (~ expanded)."""
    return os.path.exists(expand_home(path))


def get_stats(path):
    """os.stat() of path, or None if it doesn't exist. Other errors propagate."""
    try:
        return os.stat(expand_home(path))
    except FileNotFoundError:
        return None
