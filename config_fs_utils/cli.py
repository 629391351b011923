"""
cli.py - config-fs command line: lay out config directories and write config files safely.

Directory commands: expand, setup, status, ensure, ensure-paths
File commands: backup, write, write-config, stat
"""
import sys
import stat

from config_fs_utils.shared.configuration_paths import expand_home, load_env_file
from config_fs_utils.shared.config_file_handler import read_mapping
from config_fs_utils.shared.file_operations import (
    backup_file, ensure_directories, get_stats, write_file, write_config_files,
)
from config_fs_utils.shared.logger import create_logger
from config_fs_utils.shared.output_formatter import table, write_results
from config_fs_utils.managers.directory_manager import (
    ensure_directories_from_paths, setup_standard_mutt_dirs, verify_layout,
)

log = create_logger("config-fs")

VALUE_FLAGS = ("--base", "--content", "--from", "--mode", "--manifest")


class UsageError(Exception):
    pass


def _get_flag(args, flag, default=None):
    try:
        idx = args.index(flag)
        return args[idx + 1]
    except (ValueError, IndexError):
        return default


def _positionals(args):
    """Arguments that are neither flags nor flag values."""
    result = []
    skip = False
    for arg in args:
        if skip:
            skip = False
            continue
        if arg in VALUE_FLAGS:
            skip = True
            continue
        if arg.startswith("--"):
            continue
        result.append(arg)
    return result


def _parse_mode(args):
    raw = _get_flag(args, "--mode")
    if raw is None:
        return None
    try:
        return int(raw, 8)
    except ValueError:
        raise ValueError(f"Invalid --mode (expected octal like 600): {raw}") from None


def _read_content(args):
    """Content from --content or --from <file>, exactly one of them."""
    content = _get_flag(args, "--content")
    source = _get_flag(args, "--from")
    if (content is None) == (source is None):
        raise UsageError("<file> (--content <text> | --from <src>): give exactly one of --content or --from")
    if source is not None:
        with open(expand_home(source), "r", encoding="utf-8", newline="") as f:
            return f.read()
    return content


def _single_target(args, usage):
    targets = _positionals(args)
    if len(targets) != 1:
        raise UsageError(usage)
    return targets[0]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_expand(args):
    print(expand_home(_single_target(args, "<path>")))


def cmd_setup(args):
    created = setup_standard_mutt_dirs(_get_flag(args, "--base"))
    print(table(["Key", "Directory"], [[k, v] for k, v in created.items()]))


def cmd_status(args):
    result = verify_layout(_get_flag(args, "--base"))
    healthy = result["healthy"]
    issues = result["issues"]
    print()
    print("Directory Layout")
    print(f"Healthy: {len(healthy)}, Issues: {len(issues)}")
    for path in healthy:
        print(f"  [OK] {path}")
    for issue in issues:
        print(f"  [ISSUE] {issue['item']}: {issue['problem']} ({issue['fix']})")
    print()
    return 1 if issues else 0


def cmd_ensure(args):
    dirs = _positionals(args)
    if not dirs:
        raise UsageError("<dir> [<dir> ...]")
    for path in ensure_directories(dirs):
        print(path)


def cmd_ensure_paths(args):
    paths = read_mapping(_single_target(args, "<paths.json|paths.yaml>"))
    for path in ensure_directories_from_paths(paths):
        print(path)


def cmd_backup(args):
    target = _single_target(args, "<file>")
    backup_path = backup_file(target)
    if backup_path is None:
        print(f"Nothing to back up: {expand_home(target)}")
    else:
        print(backup_path)


def cmd_write(args):
    target = _single_target(args, "<file> (--content <text> | --from <src>) [--backup] [--mode <octal>]")
    result = write_file(
        target,
        _read_content(args),
        backup="--backup" in args,
        permissions=_parse_mode(args),
    )
    print(write_results([result]))


def cmd_write_config(args):
    manifest = _get_flag(args, "--manifest")
    if manifest is not None:
        files = read_mapping(manifest)
    else:
        target = _single_target(
            args, "(<file> (--content <text> | --from <src>) | --manifest <map>)",
        )
        files = {target: _read_content(args)}

    options = {}
    if "--no-backup" in args:
        options["backup"] = False
    mode = _parse_mode(args)
    if mode is not None:
        options["permissions"] = mode
    print(write_results(write_config_files(files, **options)))


def cmd_stat(args):
    target = expand_home(_single_target(args, "<path>"))
    st = get_stats(target)
    if st is None:
        print(f"Not found: {target}")
        return 1
    kind = "directory" if stat.S_ISDIR(st.st_mode) else "file"
    print(table(
        ["Path", "Type", "Size", "Mode"],
        [[target, kind, st.st_size, f"{st.st_mode & 0o777:o}"]],
    ))
    return 0


COMMANDS = {
    "expand": cmd_expand,
    "setup": cmd_setup,
    "status": cmd_status,
    "ensure": cmd_ensure,
    "ensure-paths": cmd_ensure_paths,
    "backup": cmd_backup,
    "write": cmd_write,
    "write-config": cmd_write_config,
    "stat": cmd_stat,
}


def _print_help():
    print("config-fs - Config directory layout and safe config file writes")
    print()
    print("Directories:")
    print("  expand <path>                  Show a path with ~ expanded")
    print("  setup [--base <dir>]           Create the standard Mutt layout")
    print("  status [--base <dir>]          Check the standard Mutt layout")
    print("  ensure <dir> [<dir> ...]       Create directories (and parents)")
    print("  ensure-paths <map>             Create directories named in a paths file")
    print()
    print("Files:")
    print("  backup <file>                  Copy a file to <file>.backup-<timestamp>")
    print("  write <file> (--content <text> | --from <src>) [--backup] [--mode <octal>]")
    print("  write-config (<file> (--content <text> | --from <src>) | --manifest <map>)")
    print("               [--no-backup] [--mode <octal>]   (defaults: backup, mode 600)")
    print("  stat <path>                    Show type, size, and mode")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("-h", "--help"):
        _print_help()
        sys.exit(0)

    load_env_file()

    command = argv[0]
    rest = argv[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print("Available: " + ", ".join(COMMANDS))
        sys.exit(1)

    try:
        code = handler(rest) or 0
    except UsageError as e:
        print(f"Usage: config-fs {command} {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        log.error(f"{command} failed: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
