"""Tests for the command line entry point."""

import pytest

from docforge import settings as settings_module
from docforge.__main__ import main
from docforge.settings import SettingsPersistence

SAMPLE = "Hello, world!\nSOLID principles in action\n\tClean architecture\n[Image: image.png]"


@pytest.fixture
def persistence(tmp_path, monkeypatch):
    persistence = SettingsPersistence(config_dir=tmp_path / "config")
    monkeypatch.setattr(settings_module, "get_persistence", lambda: persistence)
    return persistence


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


def test_saves_sample_to_file(tmp_path, persistence):
    target = tmp_path / "sample.txt"

    assert main(["--backend", "file", "--output", str(target)]) == 0

    assert target.read_text(encoding="utf-8") == SAMPLE


def test_print_writes_rendering_to_stdout(tmp_path, persistence, capsys):
    target = tmp_path / "sample.txt"

    assert main(["--output", str(target), "--print"]) == 0

    assert capsys.readouterr().out == SAMPLE + "\n"


def test_uses_saved_settings(tmp_path, persistence):
    target = tmp_path / "from_settings.txt"
    persistence.save_settings({"backend": "file", "target": str(target)})

    assert main([]) == 0

    assert target.read_text(encoding="utf-8") == SAMPLE


def test_saved_target_ignored_for_other_backend(tmp_path, persistence):
    persistence.save_settings({"backend": "file", "target": str(tmp_path / "unused.txt")})
    db_path = tmp_path / "docs.db"

    assert main(["--backend", "sqlite", "--output", str(db_path)]) == 0

    assert db_path.exists()
    assert not (tmp_path / "unused.txt").exists()


def test_storage_error_exits_with_status_1(tmp_path, persistence, capsys):
    target = tmp_path / "dir"
    target.mkdir()

    assert main(["--backend", "file", "--output", str(target)]) == 1

    assert capsys.readouterr().err.startswith("Error: ")


def test_unknown_backend_is_rejected(persistence):
    with pytest.raises(SystemExit):
        main(["--backend", "floppy"])
