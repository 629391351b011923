"""
directory_manager.py - Standard directory layout and paths-object driven directory creation.

Two callers of ensure_directories():
  1. setup_standard_mutt_dirs() - creates STANDARD_MUTT_DIRS under a base directory (default ~)
  2. ensure_directories_from_paths() - creates directories named by a paths object, e.g.
       {"configDir": "~/.config/mutt", "mainMuttrc": "~/.config/mutt/muttrc"}
     File keys (mainMuttrc, accountMuttrc) get their parent directory created instead.

Functions are standalone (no class) - matching the pattern of the shared modules.
"""
import os
from enum import Enum

from config_fs_utils.shared.configuration_paths import (
    STANDARD_MUTT_DIRS, STANDARD_DIR_KEYS, FILE_PATH_KEYS, expand_home, get_base_dir,
)
from config_fs_utils.shared.file_operations import ensure_directories
from config_fs_utils.shared.logger import create_logger

log = create_logger("directory-manager")


class PathKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _standard_dirs(base_dir):
    return [os.path.join(base_dir, rel) for rel in STANDARD_MUTT_DIRS]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_path_key(key):
    """FILE for keys naming a file (case-insensitive), DIRECTORY for everything else."""
    if key.lower() in FILE_PATH_KEYS:
        return PathKind.FILE
    return PathKind.DIRECTORY


def setup_standard_mutt_dirs(base_dir=None):
    """
    Create the standard Mutt directory structure under base_dir.
    Returns: {"config": ..., "accounts": ..., "tokens": ..., "cache_headers": ..., "cache_bodies": ...}
    """
    base_dir = base_dir or get_base_dir()
    created = ensure_directories(_standard_dirs(base_dir))
    log.info(f"Standard layout ready under {expand_home(base_dir)} ({len(created)} directories)")
    return dict(zip(STANDARD_DIR_KEYS, created))


def ensure_directories_from_paths(paths):
    """
    Create every directory a paths object refers to.
    Duplicates are created once, in first-seen order. Returns the created paths.
    """
    dirs = {}
    for key, file_path in paths.items():
        expanded = expand_home(file_path)
        if classify_path_key(key) is PathKind.FILE:
            dirs[os.path.dirname(expanded)] = key
        else:
            dirs[expanded] = key
    return ensure_directories(list(dirs))


def verify_layout(base_dir=None):
    """
    Check the standard layout without creating anything.
    Returns dict with healthy (list of paths) and issues (item/problem/fix dicts).
    """
    base_dir = base_dir or get_base_dir()
    healthy = []
    issues = []
    for key, dir_path in zip(STANDARD_DIR_KEYS, _standard_dirs(base_dir)):
        expanded = expand_home(dir_path)
        if os.path.isdir(expanded):
            healthy.append(expanded)
        elif os.path.exists(expanded):
            issues.append({
                "item": key,
                "problem": f"Not a directory: {expanded}",
                "fix": "Move the file aside, then run setup",
            })
        else:
            issues.append({
                "item": key,
                "problem": f"Missing directory: {expanded}",
                "fix": "Run setup",
            })
    log.info(f"verify_layout: {len(healthy)} healthy, {len(issues)} issues")
    return {"healthy": healthy, "issues": issues}
