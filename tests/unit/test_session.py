"""Unit tests for sta_shell.core — session, termination flag and engine."""
from __future__ import annotations

import pytest

from sta_shell.core import (
    AnalysisEngine,
    InterpreterSession,
    SessionError,
    ShellState,
    Termination,
    make_exit_command,
)


class TestTermination:
    def test_starts_running(self) -> None:
        termination = Termination()
        assert termination.state is ShellState.RUNNING
        assert not termination.requested

    def test_request_terminates(self) -> None:
        termination = Termination()
        termination.request()
        assert termination.state is ShellState.TERMINATING
        assert termination.requested

    def test_request_is_idempotent(self) -> None:
        termination = Termination()
        termination.request()
        termination.request()
        assert termination.requested


class TestExitCommand:
    def test_sets_flag_and_returns_empty_result(self) -> None:
        termination = Termination()
        command_exit = make_exit_command(termination)
        assert command_exit() == ""
        assert termination.requested

    def test_ignores_exit_code(self) -> None:
        termination = Termination()
        make_exit_command(termination)("3")
        assert termination.requested


class TestAnalysisEngine:
    def test_singleton_round_trip(self) -> None:
        engine = AnalysisEngine()
        AnalysisEngine.set_engine(engine)
        assert AnalysisEngine.engine() is engine

    def test_defaults(self) -> None:
        engine = AnalysisEngine()
        assert engine.thread_count == 1
        assert engine.interpreter is None

    def test_set_thread_count(self) -> None:
        engine = AnalysisEngine()
        engine.set_thread_count(8)
        assert engine.thread_count == 8


class TestInterpreterSession:
    def test_new_session_is_running(self, session: InterpreterSession) -> None:
        assert not session.termination.requested
        assert session.engine is None
        assert not session.closed

    def test_bind_engine_binds_interpreter(self, session: InterpreterSession, interpreter) -> None:
        engine = AnalysisEngine()
        session.bind_engine(engine)
        assert session.engine is engine
        assert engine.interpreter is interpreter

    def test_engine_cannot_be_rebound(self, session: InterpreterSession) -> None:
        session.bind_engine(AnalysisEngine())
        with pytest.raises(SessionError):
            session.bind_engine(AnalysisEngine())

    def test_eval_delegates(self, session: InterpreterSession, interpreter) -> None:
        assert session.eval("set a 1").ok
        assert interpreter.evaluated == ["set a 1"]

    def test_eval_reported_writes_error_text(self, make_interpreter, console, err_console) -> None:
        session = InterpreterSession(
            make_interpreter(failing={"bogus"}), console=console, err_console=err_console
        )
        result = session.eval_reported("bogus")
        assert not result.ok
        assert err_console.file.getvalue() == "error in bogus\n"

    def test_error_text_is_not_treated_as_markup(self, make_interpreter, console, err_console) -> None:
        session = InterpreterSession(
            make_interpreter(failing={"[/bold]"}), console=console, err_console=err_console
        )
        session.eval_reported("[/bold]")
        assert "error in [/bold]" in err_console.file.getvalue()

    def test_eval_reported_success_is_silent(self, session: InterpreterSession, err_console) -> None:
        assert session.eval_reported("set a 1").ok
        assert err_console.file.getvalue() == ""

    def test_source_echo_verbose_quotes_path(self, session: InterpreterSession, interpreter) -> None:
        session.source_echo_verbose("my dir/run.tcl")
        assert interpreter.evaluated == ["source -echo -verbose {my dir/run.tcl}"]

    def test_close_releases_interpreter_once(self, session: InterpreterSession, interpreter) -> None:
        session.close()
        session.close()
        assert session.closed
        assert interpreter.closed

    def test_eval_after_close_raises(self, session: InterpreterSession) -> None:
        session.close()
        with pytest.raises(SessionError):
            session.eval("set a 1")
