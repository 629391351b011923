import os

import pytest

from config_fs_utils.cli import main
from config_fs_utils.shared.configuration_paths import BASE_DIR_ENV
from conftest import mode_of, read


def run(capsys, *argv):
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    out = capsys.readouterr().out
    return exc.value.code, out


def test_help(capsys):
    code, out = run(capsys)
    assert code == 0
    assert "write-config" in out


def test_unknown_command(capsys):
    code, out = run(capsys, "frobnicate")
    assert code == 1
    assert "Unknown command: frobnicate" in out


def test_expand(capsys, fake_home):
    code, out = run(capsys, "expand", "~/.config/mutt")
    assert code == 0
    assert out.strip() == os.path.join(fake_home, ".config/mutt")


def test_usage_error(capsys):
    code, out = run(capsys, "expand")
    assert code == 1
    assert out.startswith("Usage: config-fs expand <path>")


def test_setup_and_status(capsys, work_dir):
    code, out = run(capsys, "status", "--base", str(work_dir))
    assert code == 1
    assert "Issues: 5" in out

    code, out = run(capsys, "setup", "--base", str(work_dir))
    assert code == 0
    assert "cache_bodies" in out
    assert (work_dir / ".cache" / "mutt" / "bodies").is_dir()

    code, out = run(capsys, "status", "--base", str(work_dir))
    assert code == 0
    assert "Healthy: 5, Issues: 0" in out


def test_setup_uses_base_from_dotenv(capsys, work_dir, monkeypatch):
    (work_dir / ".env").write_text(f"{BASE_DIR_ENV}={work_dir / 'base'}\n")
    monkeypatch.chdir(work_dir)
    code, _ = run(capsys, "setup")
    assert code == 0
    assert (work_dir / "base" / ".config" / "mutt" / "accounts").is_dir()


def test_ensure(capsys, work_dir):
    code, out = run(capsys, "ensure", str(work_dir / "a"), str(work_dir / "b" / "c"))
    assert code == 0
    assert out.split() == [str(work_dir / "a"), str(work_dir / "b" / "c")]
    assert (work_dir / "b" / "c").is_dir()


def test_ensure_failure_is_reported(capsys, work_dir, tmp_path):
    (work_dir / "blocker").write_text("x")
    code, out = run(capsys, "ensure", str(work_dir / "blocker" / "sub"))
    assert code == 1
    assert out.startswith("ERROR: ")
    assert "[ERROR] [config-fs] ensure failed" in read(tmp_path / "logs" / "config-fs.log")


def test_ensure_paths(capsys, work_dir):
    paths = work_dir / "paths.yaml"
    paths.write_text(f"configDir: {work_dir / 'mutt'}\nmainMuttrc: {work_dir / 'mutt' / 'muttrc'}\n")
    code, out = run(capsys, "ensure-paths", str(paths))
    assert code == 0
    assert out.split() == [str(work_dir / "mutt")]


def test_backup(capsys, work_dir):
    target = work_dir / "app.ini"
    code, out = run(capsys, "backup", str(target))
    assert code == 0
    assert out.startswith("Nothing to back up")

    target.write_text("x=1")
    code, out = run(capsys, "backup", str(target))
    assert code == 0
    assert read(out.strip()) == "x=1"


def test_write(capsys, work_dir):
    target = work_dir / "sub" / "app.ini"
    code, out = run(capsys, "write", str(target), "--content", "x=1", "--mode", "640")
    assert code == 0
    assert read(target) == "x=1"
    assert mode_of(target) == 0o640
    assert "created" in out


def test_write_from_file_with_backup(capsys, work_dir):
    source = work_dir / "source.ini"
    source.write_text("x=2")
    target = work_dir / "app.ini"
    target.write_text("x=1")
    code, out = run(capsys, "write", str(target), "--from", str(source), "--backup")
    assert code == 0
    assert read(target) == "x=2"
    assert "overwritten-with-backup" in out


def test_write_needs_exactly_one_content_source(capsys, work_dir):
    code, out = run(capsys, "write", str(work_dir / "app.ini"))
    assert code == 1
    assert out.startswith("Usage: config-fs write")


def test_write_rejects_bad_mode(capsys, work_dir):
    code, out = run(capsys, "write", str(work_dir / "app.ini"), "--content", "x", "--mode", "rw")
    assert code == 1
    assert "Invalid --mode" in out


def test_write_config_twice(capsys, work_dir):
    target = work_dir / "config" / "app.ini"
    code, out = run(capsys, "write-config", str(target), "--content", "x=1")
    assert code == 0
    assert mode_of(target) == 0o600
    assert "(none)" in out

    code, out = run(capsys, "write-config", str(target), "--content", "x=2")
    assert code == 0
    assert read(target) == "x=2"
    assert "overwritten-with-backup" in out


def test_write_config_manifest(capsys, work_dir):
    manifest = work_dir / "files.json"
    manifest.write_text(
        '{"%s": "a=1", "%s": "b=2"}' % (work_dir / "a.ini", work_dir / "nested" / "b.ini")
    )
    code, out = run(capsys, "write-config", "--manifest", str(manifest), "--no-backup", "--mode", "644")
    assert code == 0
    assert read(work_dir / "nested" / "b.ini") == "b=2"
    assert mode_of(work_dir / "a.ini") == 0o644


def test_stat(capsys, work_dir):
    target = work_dir / "app.ini"
    code, out = run(capsys, "stat", str(target))
    assert code == 1
    assert out.startswith("Not found")

    target.write_text("12345")
    os.chmod(target, 0o600)
    code, out = run(capsys, "stat", str(target))
    assert code == 0
    assert out.split("\n")[2].split() == [str(target), "file", "5", "600"]


def test_stat_directory_with_home_path(capsys, fake_home):
    os.makedirs(os.path.join(fake_home, ".config", "mutt"))
    os.chmod(os.path.join(fake_home, ".config", "mutt"), 0o700)
    code, out = run(capsys, "stat", "~/.config/mutt")
    assert code == 0
    row = out.split("\n")[2].split()
    assert row[0] == os.path.join(fake_home, ".config/mutt")
    assert row[1] == "directory"
    assert row[3] == "700"
