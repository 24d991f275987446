"""Tests for the command session controller."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cmdrunner.core.runner.protocols import Selection
from cmdrunner.core.runner.session import CommandSession
from cmdrunner.core.templates.errors import PersistenceError
from cmdrunner.core.templates.history import HistoryRecorder
from cmdrunner.core.templates.models import Template
from cmdrunner.core.templates.store import TemplateStore
from tests.fakes import FakeClipboard, FakeEditor, FakeSelector, RecordingRunner, ScriptedTerminal

LS_LINE = "List all files in specified directory :: ls -la {DIRECTORY}"
GREP_LINE = 'Search for text pattern recursively :: grep -r "{PATTERN}" {DIRECTORY:-.}'


def _store() -> TemplateStore:
    return TemplateStore.from_text(f"{LS_LINE}\n{GREP_LINE}\nShow disk usage :: df -h\n")


def _session(
    history_path: Path,
    terminal: ScriptedTerminal,
    runner: RecordingRunner | None = None,
    clipboard: FakeClipboard | None = None,
    editor: FakeEditor | None = None,
) -> CommandSession:
    return CommandSession(
        store=_store(),
        history=HistoryRecorder(history_path),
        terminal=terminal,
        runner=runner or RecordingRunner(),
        clipboard=clipboard,
        editor=editor,
    )


class TestRunSelection:
    """Tests for CommandSession.run_selection."""

    def test_resolves_and_runs(self, history_path: Path) -> None:
        """Test the directory listing example end to end."""
        terminal = ScriptedTerminal(answers=["/tmp"])
        runner = RecordingRunner()
        session = _session(history_path, terminal, runner)

        outcome = session.run_selection(LS_LINE)

        assert outcome.status == "executed"
        assert outcome.command == "ls -la /tmp"
        assert outcome.exit_code == 0
        assert runner.commands == ["ls -la /tmp"]
        assert "Executing: ls -la /tmp" in terminal.output
        assert "Command completed successfully." in terminal.output

    def test_default_value_example(self, history_path: Path) -> None:
        """Test the grep example with the directory left empty."""
        terminal = ScriptedTerminal(answers=["TODO", ""])
        runner = RecordingRunner()

        outcome = _session(history_path, terminal, runner).run_selection(GREP_LINE)

        assert outcome.command == 'grep -r "TODO" -.'
        assert terminal.labels == [
            "Enter value for PATTERN",
            "Enter value for DIRECTORY [default: -.]",
        ]

    def test_missing_required_cancels(self, history_path: Path) -> None:
        """Test that an empty required value runs and records nothing."""
        terminal = ScriptedTerminal(answers=[""])
        runner = RecordingRunner()

        outcome = _session(history_path, terminal, runner).run_selection(LS_LINE)

        assert outcome.status == "cancelled"
        assert outcome.message == "Command execution cancelled."
        assert runner.commands == []
        assert not history_path.exists()
        assert "Error: A value is required for DIRECTORY." in terminal.output

    def test_no_placeholders_runs_directly(
        self, history_path: Path, terminal: ScriptedTerminal, runner: RecordingRunner
    ) -> None:
        """Test that a plain template runs without prompting."""
        _session(history_path, terminal, runner).run_selection("Show disk usage :: df -h")

        assert terminal.labels == []
        assert runner.commands == ["df -h"]
        assert "Command has placeholders that need values:" not in terminal.output

    def test_nonzero_exit_reported(self, history_path: Path) -> None:
        """Test that a failing command is reported, not raised."""
        terminal = ScriptedTerminal()
        outcome = _session(history_path, terminal, RecordingRunner(exit_code=2)).run_selection(
            "Show disk usage :: df -h"
        )

        assert outcome.status == "executed"
        assert outcome.exit_code == 2
        assert outcome.message == "Command finished with exit code 2."

    def test_copy_instead_of_run(self, history_path: Path) -> None:
        """Test that pressing c copies the resolved command and skips running."""
        terminal = ScriptedTerminal(answers=["/var"], keys=["c"])
        runner = RecordingRunner()
        clipboard = FakeClipboard()

        outcome = _session(history_path, terminal, runner, clipboard).run_selection(LS_LINE)

        assert outcome.status == "copied"
        assert clipboard.copied == ["ls -la /var"]
        assert runner.commands == []
        assert not history_path.exists()

    def test_other_key_runs(self, history_path: Path) -> None:
        """Test that any other key continues to execution."""
        terminal = ScriptedTerminal(answers=["/var"], keys=["x"])
        runner = RecordingRunner()
        clipboard = FakeClipboard()

        outcome = _session(history_path, terminal, runner, clipboard).run_selection(LS_LINE)

        assert outcome.status == "executed"
        assert clipboard.copied == []

    def test_copy_not_offered_without_clipboard(self, history_path: Path) -> None:
        """Test that no key is read when the clipboard is unavailable."""
        terminal = ScriptedTerminal(keys=["c"])
        clipboard = FakeClipboard(is_available=False)

        outcome = _session(history_path, terminal, clipboard=clipboard).run_selection(
            "Show disk usage :: df -h"
        )

        assert outcome.status == "executed"
        assert terminal.keys == ["c"]

    def test_copy_failure_does_not_run(self, history_path: Path) -> None:
        """Test that a failed copy is reported and nothing runs."""
        terminal = ScriptedTerminal(keys=["C"])
        runner = RecordingRunner()
        clipboard = FakeClipboard(fail=True)

        outcome = _session(history_path, terminal, runner, clipboard).run_selection(
            "Show disk usage :: df -h"
        )

        assert outcome.status == "cancelled"
        assert runner.commands == []
        assert "Clipboard error: Please install xclip or wl-copy" in terminal.output


class TestHistoryRecording:
    """Tests for history recording during runs."""

    def test_custom_command_recorded_once(self, history_path: Path) -> None:
        """Test that running an ad-hoc command twice logs it once."""
        session = _session(history_path, ScriptedTerminal())

        session.run_custom("echo hello")
        session.run_custom("echo hello")

        assert HistoryRecorder(history_path).read_entries() == [
            "Custom command from history :: echo hello"
        ]

    def test_raw_command_recorded(self, history_path: Path) -> None:
        """Test that the unresolved command text is what gets logged."""
        terminal = ScriptedTerminal(answers=["Bob"])
        _session(history_path, terminal).run_custom("echo hi {NAME}")

        assert HistoryRecorder(history_path).read_entries() == [
            "Custom command from history :: echo hi {NAME}"
        ]

    def test_store_templates_not_recorded(self, history_path: Path) -> None:
        """Test that commands already in the store are not logged."""
        _session(history_path, ScriptedTerminal()).run_selection("Show disk usage :: df -h")
        assert not history_path.exists()

    def test_persistence_failure_does_not_block_run(self, history_path: Path) -> None:
        """Test that a history write error is reported and the command still runs."""
        terminal = ScriptedTerminal()
        runner = RecordingRunner()
        session = _session(history_path, terminal, runner)
        session.history = MagicMock()
        session.history.record.side_effect = PersistenceError("disk full", str(history_path))

        outcome = session.run_custom("uptime")

        assert outcome.status == "executed"
        assert runner.commands == ["uptime"]
        assert "Warning: disk full" in terminal.output

    def test_persistence_failure_logged_below_warning(
        self, history_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that an echoed history failure is not repeated at warning level."""
        caplog.set_level(logging.INFO, logger="cmdrunner")
        session = _session(history_path, ScriptedTerminal())
        session.history = MagicMock()
        session.history.record.side_effect = PersistenceError("disk full", str(history_path))

        session.run_custom("uptime")

        assert "Failed to record history: disk full" in caplog.messages
        assert all(r.levelno < logging.WARNING for r in caplog.records)


class TestCustomCommand:
    """Tests for CommandSession.run_custom."""

    def test_empty_input(self, history_path: Path) -> None:
        """Test that empty input returns to the menu."""
        runner = RecordingRunner()
        outcome = _session(history_path, ScriptedTerminal(), runner).run_custom("   ")

        assert outcome.status == "empty"
        assert runner.commands == []

    def test_placeholders_in_custom_command(self, history_path: Path) -> None:
        """Test that typed commands get placeholder prompts too."""
        terminal = ScriptedTerminal(answers=["", "host1"])
        runner = RecordingRunner()

        _session(history_path, terminal, runner).run_custom("ping -c {COUNT:3} {HOST}")

        assert runner.commands == ["ping -c 3 host1"]

    def test_custom_command_containing_separator(self, history_path: Path) -> None:
        """Test that a typed command is run whole even if it contains ::."""
        runner = RecordingRunner()
        _session(history_path, ScriptedTerminal(), runner).run_custom("echo 'a :: b'")
        assert runner.commands == ["echo 'a :: b'"]


class TestSearchAndRun:
    """Tests for CommandSession.search_and_run."""

    def test_aborted_picker(self, history_path: Path) -> None:
        """Test that an aborted picker returns None."""
        selector = FakeSelector(None)
        session = _session(history_path, ScriptedTerminal())

        assert session.search_and_run(selector) is None
        assert selector.items == session.store.lines()

    def test_selected_line_runs(self, history_path: Path) -> None:
        """Test that the selected line is resolved and run."""
        runner = RecordingRunner()
        selector = FakeSelector(Selection(line=LS_LINE))
        session = _session(history_path, ScriptedTerminal(answers=["/etc"]), runner)

        outcome = session.search_and_run(selector)

        assert outcome.command == "ls -la /etc"
        assert runner.commands == ["ls -la /etc"]

    def test_copy_key_copies_raw_template(
        self,
        history_path: Path,
        terminal: ScriptedTerminal,
        runner: RecordingRunner,
        clipboard: FakeClipboard,
    ) -> None:
        """Test that ctrl-y copies the unresolved command."""
        selector = FakeSelector(Selection(line=LS_LINE, copy_requested=True))
        session = _session(history_path, terminal, runner, clipboard)

        outcome = session.search_and_run(selector)

        assert outcome.status == "copied"
        assert clipboard.copied == ["ls -la {DIRECTORY}"]
        assert runner.commands == []
        assert terminal.labels == []

    def test_picker_failure_reported(self, history_path: Path) -> None:
        """Test that a failing picker is reported as a cancelled run."""
        terminal = ScriptedTerminal()
        runner = RecordingRunner()
        session = _session(history_path, terminal, runner)

        outcome = session.search_and_run(FakeSelector(None, fail=True))

        assert outcome.status == "cancelled"
        assert runner.commands == []
        assert "Error: fzf exited with status 2" in terminal.output

    def test_history_entry_with_separator_runs_whole(self, history_path: Path) -> None:
        """Test that a picked history line keeps a command containing ::."""
        runner = RecordingRunner()
        selector = FakeSelector(Selection(line="Custom command from history :: echo 'a :: b'"))

        _session(history_path, ScriptedTerminal(), runner).search_and_run(selector)

        assert runner.commands == ["echo 'a :: b'"]


class TestEditTemplates:
    """Tests for CommandSession.edit_templates."""

    def test_edit_replaces_store(self, history_path: Path) -> None:
        """Test that the edited text becomes the new store."""
        editor = FakeEditor(result="Only one :: echo one\n\n")
        session = _session(history_path, ScriptedTerminal(), editor=editor)
        original_text = session.store.to_text()

        assert session.edit_templates() is True
        assert editor.received == original_text
        assert session.store.templates == (Template("Only one", "echo one"),)

    def test_unmodified_edit_keeps_collection(self, history_path: Path) -> None:
        """Test that saving without changes reproduces the same store."""
        session = _session(history_path, ScriptedTerminal(), editor=FakeEditor(passthrough=True))
        before = session.store

        assert session.edit_templates() is True
        assert session.store == before

    def test_abandoned_edit(self, history_path: Path) -> None:
        """Test that an abandoned edit keeps the store."""
        session = _session(history_path, ScriptedTerminal(), editor=FakeEditor(result=None))
        before = session.store

        assert session.edit_templates() is False
        assert session.store is before

    def test_no_editor(self, history_path: Path) -> None:
        """Test that editing is a no-op without an editor."""
        assert _session(history_path, ScriptedTerminal()).edit_templates() is False

    def test_editor_failure_keeps_store(self, history_path: Path) -> None:
        """Test that an editor that cannot run is reported and the store is kept."""
        terminal = ScriptedTerminal()
        session = _session(history_path, terminal, editor=FakeEditor(fail=True))
        before = session.store

        assert session.edit_templates() is False
        assert session.store is before
        assert "Editor error: /nonexistent/editor: Editing failed" in terminal.output
