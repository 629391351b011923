"""
config-fs-utils - Filesystem helpers for configuration file management.

Simple API:   setup_standard_mutt_dirs, write_config_files
Flexible API: ensure_directory, ensure_directories, write_file, write_files, backup_file
Utilities:    expand_home, exists, get_stats, ensure_directories_from_paths
"""
from config_fs_utils.shared.configuration_paths import (
    STANDARD_MUTT_DIRS, expand_home, get_home,
)
from config_fs_utils.shared.file_operations import (
    CONFIG_FILE_DEFAULTS, WriteResult, WriteStatus,
    backup_file, ensure_directories, ensure_directory, exists, get_stats,
    write_config_files, write_file, write_files,
)
from config_fs_utils.managers.directory_manager import (
    PathKind, classify_path_key, ensure_directories_from_paths,
    setup_standard_mutt_dirs, verify_layout,
)

__version__ = "1.0.0"

__all__ = [
    "STANDARD_MUTT_DIRS", "CONFIG_FILE_DEFAULTS",
    "WriteResult", "WriteStatus", "PathKind",
    "setup_standard_mutt_dirs", "write_config_files",
    "ensure_directory", "ensure_directories", "write_file", "write_files", "backup_file",
    "expand_home", "get_home", "exists", "get_stats",
    "ensure_directories_from_paths", "classify_path_key", "verify_layout",
]
