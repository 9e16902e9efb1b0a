from __future__ import annotations

from prompt_toolkit.output import DummyOutput, Output, create_output


class TerminalCleaner:
    """Erase the menu frame left on screen when the session ends."""

    def __init__(self, output: Output | None = None) -> None:
        self._output = output

    @property
    def output(self) -> Output:
        if self._output is None:
            self._output = create_output()
        return self._output

    def clear_lines(self, count: int) -> None:
        """Move the cursor up ``count`` lines and clear everything below it."""
        output = self.output
        if count > 0:
            output.cursor_up(count)
        output.erase_down()
        output.flush()


def headless_terminal() -> TerminalCleaner:
    return TerminalCleaner(DummyOutput())
