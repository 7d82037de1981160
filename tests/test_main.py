import logging

import pytest

import main as launcher
from utils.logger import logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    setup_logging(None)


def test_missing_directory_prints_usage(capsys):
    assert launcher.main([]) == 0

    assert "usage:" in capsys.readouterr().out


def test_empty_scan_exits_cleanly(tmp_path, write_script, capsys):
    write_script("notes.txt", executable=False)

    assert launcher.main([str(tmp_path)]) == 0

    assert "No executable scripts found" in capsys.readouterr().out


def test_unreadable_root_is_fatal(tmp_path, capsys):
    assert launcher.main([str(tmp_path / "missing")]) == 1

    assert "cannot read directory" in capsys.readouterr().out


def test_bad_config_path(tmp_path, capsys):
    assert launcher.main(["--config", str(tmp_path / "none.ini"), str(tmp_path)]) == 1

    assert "cannot load config" in capsys.readouterr().out


def test_runs_menu_inside_session(tmp_path, write_script, monkeypatch):
    write_script("run.sh", "#!/bin/sh\n# Run things\n")
    events = []

    class FakeSession:
        height = 24

        def __enter__(self):
            events.append("enter")
            return self

        def __exit__(self, *exc):
            events.append("leave")
            return False

        def draw(self, renderable):
            pass

        def poll_key(self, timeout_ms):
            raise KeyboardInterrupt

    monkeypatch.setattr(launcher, "TerminalSession", FakeSession)

    assert launcher.main([str(tmp_path)]) == 0
    assert events == ["enter", "leave"]


def test_closed_input_exits_cleanly(tmp_path, write_script, monkeypatch):
    write_script("run.sh")

    class ClosedInputSession:
        height = 24

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def draw(self, renderable):
            pass

        def poll_key(self, timeout_ms):
            raise EOFError

    monkeypatch.setattr(launcher, "TerminalSession", ClosedInputSession)

    assert launcher.main([str(tmp_path)]) == 0


def test_log_file_option(tmp_path):
    log_file = tmp_path / "logs" / "launcher.log"

    launcher.main(["--log-file", str(log_file), "--debug", str(tmp_path)])

    assert logger.level == logging.DEBUG
    assert "Startup della applicazione" in log_file.read_text(encoding="utf-8")
