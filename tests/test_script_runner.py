import os

from conftest import make_script
from db.script_repository import scan_directory
from menu.script_runner import execute_selected, format_report, run_script
from models.app_state import AppState
from models.script_model import Script


def _script(path):
    return Script(path=str(path), name=path.name)


def test_failure_report_with_stderr(write_script):
    path = write_script("fail.sh", "#!/bin/sh\necho boom >&2\nexit 2\n")

    report = run_script(_script(path))

    assert report.startswith("✗ Script failed\nExit code: 2")
    assert "=== OUTPUT ===\n(no output)" in report
    assert "=== ERRORS ===\nboom" in report


def test_success_report(write_script):
    path = write_script("ok.sh", "#!/bin/sh\necho hello\n")

    report = run_script(_script(path))

    assert report.startswith("✓ Script completed successfully\nExit code: 0")
    assert "=== OUTPUT ===\nhello" in report
    assert report.endswith("=== ERRORS ===\n(none)")


def test_invalid_bytes_are_replaced(write_script):
    path = write_script("bytes.sh", "#!/bin/sh\nprintf 'a\\377b'\n")

    report = run_script(_script(path))

    assert "a�b" in report


def test_killed_by_signal_reports_minus_one(write_script):
    path = write_script("killed.sh", "#!/bin/sh\nkill -9 $$\n")

    report = run_script(_script(path))

    assert "Exit code: -1" in report


def test_format_report_placeholders():
    report = format_report(0, "", "")

    assert report == (
        "✓ Script completed successfully\nExit code: 0\n\n"
        "=== OUTPUT ===\n(no output)\n\n"
        "=== ERRORS ===\n(none)"
    )


def test_execute_selected_shows_placeholder_before_running():
    state = AppState([make_script("a.sh")])
    seen = []

    def redraw():
        seen.append(state.output_text)

    execute_selected(state, redraw=redraw, runner=lambda script: "done")

    assert seen == ["Running script...\n\nPlease wait..."]
    assert state.viewing_output
    assert state.output_text == "done"


def test_launch_failure_is_reported_inline(tmp_path):
    missing = Script(path=str(tmp_path / "gone.sh"), name="gone.sh")
    state = AppState([missing])

    execute_selected(state)

    assert state.viewing_output
    assert state.output_text.startswith("✗ Failed to launch gone.sh")


def test_permission_revoked_is_reported_inline(write_script):
    path = write_script("revoked.sh", "#!/bin/sh\necho hi\n")
    os.chmod(path, 0o644)
    state = AppState([_script(path)])

    execute_selected(state)

    assert state.output_text.startswith("✗ Failed to launch revoked.sh")


def test_execute_selected_without_scripts():
    state = AppState([])

    execute_selected(state, runner=lambda script: "never")

    assert not state.viewing_output


def test_script_from_relative_scan_runs_from_its_folder(tmp_path, write_script, monkeypatch):
    write_script("only_here.sh", "#!/bin/sh\necho ran-local\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PATH", "/usr/bin:/bin")
    state = AppState(scan_directory("."))

    execute_selected(state)

    assert state.output_text.startswith("✓ Script completed successfully")
    assert "ran-local" in state.output_text
