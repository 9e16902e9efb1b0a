from __future__ import annotations

from rich.console import Console
from rich.text import Text

from sm_runner.commands import ExecutionSpec
from sm_ui.tui.protocols import Presenter, PresenterSink
from sm_ui.tui.theme import ERROR_STYLE, RUNNING_STYLE


class _RichPresenterSink(PresenterSink):
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit_line(self, message: str, style: str | None) -> None:
        # Command strings and error texts are shown verbatim, never as markup.
        self._console.print(Text(message, style=style or ""))


class PresenterBase(Presenter):
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def line(self, message: str = "", style: str | None = None) -> None:
        self._sink.emit_line(message, style)


class RichPresenter(PresenterBase):
    def __init__(self, console: Console) -> None:
        super().__init__(_RichPresenterSink(console))


class PresenterExecutionReporter:
    """Show command progress and failures on the terminal."""

    def __init__(self, presenter: Presenter) -> None:
        self._presenter = presenter

    def starting(self, spec: ExecutionSpec) -> None:
        if spec.verbose:
            self._presenter.line(f"running… {spec.display}", RUNNING_STYLE)
        else:
            self._presenter.line()

    def failed(self, spec: ExecutionSpec, message: str) -> None:
        self._presenter.line(message, ERROR_STYLE)
