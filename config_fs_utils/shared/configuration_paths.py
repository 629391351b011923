"""
configuration_paths.py - Home lookup, ~ expansion, and every path constant config-fs-utils needs.

All layout constants and environment settings live here so no other file has magic strings.
Import from here: from config_fs_utils.shared.configuration_paths import expand_home, STANDARD_MUTT_DIRS
"""
import os

from dotenv import find_dotenv, load_dotenv

HOME_MARKER = "~"

# Environment settings (read at call time, never cached)
BASE_DIR_ENV = "CONFIG_FS_BASE_DIR"
LOG_DIR_ENV = "CONFIG_FS_LOG_DIR"

DEFAULT_LOG_DIR = os.path.join(HOME_MARKER, ".config-fs-utils", "logs")

# Standard Mutt directory structure, relative to a base directory
STANDARD_MUTT_DIRS = [
    ".config/mutt",
    ".config/mutt/accounts",
    ".local/etc/oauth-tokens",
    ".cache/mutt/headers",
    ".cache/mutt/bodies",
]

# Result keys for STANDARD_MUTT_DIRS, same order
STANDARD_DIR_KEYS = [
    "config",
    "accounts",
    "tokens",
    "cache_headers",
    "cache_bodies",
]

# Paths-object keys that name a file, not a directory (compared lowercased)
FILE_PATH_KEYS = frozenset(["accountmuttrc", "mainmuttrc"])


def get_home():
    """Current user's home directory. HOME, then USERPROFILE, then the platform lookup."""
    return os.environ.get("HOME") or os.environ.get("USERPROFILE") or os.path.expanduser("~")


def expand_home(path, home=None):
    """
    Expand a leading ~ to the home directory.
    Examples (home=/home/me):
      ~          -> /home/me
      ~/a/b      -> /home/me/a/b
      /etc/x     -> /etc/x       (unchanged)
      rel/~/x    -> rel/~/x      (unchanged)
    Pass home explicitly to skip the environment lookup.
    """
    path = os.fspath(path)
    if path != HOME_MARKER and not path.startswith(HOME_MARKER + "/"):
        return path
    if home is None:
        home = get_home()
    tail = path[2:].lstrip("/")
    if not tail:
        return home
    return os.path.join(home, tail)


def get_base_dir():
    """Base directory for the standard layout (CONFIG_FS_BASE_DIR or ~)."""
    return os.environ.get(BASE_DIR_ENV) or HOME_MARKER


def get_log_dir():
    """Expanded log directory (CONFIG_FS_LOG_DIR or ~/.config-fs-utils/logs)."""
    return expand_home(os.environ.get(LOG_DIR_ENV) or DEFAULT_LOG_DIR)


def load_env_file(env_file=None):
    """
    Load settings from a .env file without overriding variables already set.
    Default: the first .env found walking up from the current working directory.
    Returns True if a file was loaded.
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
    if not env_file:
        return False
    return load_dotenv(expand_home(env_file), override=False)
