"""The interactive read-eval loop."""
from __future__ import annotations

import logging

from sta_shell.core.session import InterpreterSession
from sta_shell.repl.completion import CompletionProvider
from sta_shell.repl.editor import LineEditor, ShellCompleter
from sta_shell.repl.history import HistoryStore

logger = logging.getLogger(__name__)

INTERRUPTED_MESSAGE = "Interrupted"


class InteractiveLoop:
    """Prompts, evaluates and records history until the session terminates.

    The loop stops at end of input or once the session's termination flag
    is set, which the ``exit`` command does. A flag set during bootstrap
    (``-x exit``, or ``exit`` at the end of a ``-f`` script) stops the loop
    before the first prompt. Evaluation errors are reported and never end
    the loop. Ctrl-C at the prompt abandons the line; during evaluation it
    abandons the command. The session is closed however the loop ends.

    Parameters
    ----------
    session:
        A bootstrapped session. The loop closes it on exit.
    editor:
        The line-editing front end.
    history:
        Loaded before the first prompt and saved when the loop stops.
    prompt:
        The prompt string.
    completion:
        Source of domain command completions.
    """

    def __init__(
        self,
        session: InterpreterSession,
        editor: LineEditor,
        history: HistoryStore,
        prompt: str,
        completion: CompletionProvider | None = None,
    ) -> None:
        self._session = session
        self._editor = editor
        self._history = history
        self._prompt = prompt
        self._completer = ShellCompleter(completion or CompletionProvider(), session.interpreter)

    def run(self) -> None:
        try:
            self._history.load()
            self._editor.set_completer(self._completer.complete)
            self._loop()
        finally:
            self._editor.set_completer(None)
            try:
                self._history.save()
            finally:
                self._session.close()

    def _loop(self) -> None:
        termination = self._session.termination
        while not termination.requested:
            try:
                line = self._editor.read_line(self._prompt)
            except KeyboardInterrupt:
                self._session.console.print()
                continue
            if line is None:
                logger.debug("End of input")
                break
            if line:
                self._editor.add_history(line)
            try:
                self._session.eval_reported(line)
            except KeyboardInterrupt:
                self._session.report_error(INTERRUPTED_MESSAGE)
