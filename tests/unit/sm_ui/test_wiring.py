import pytest

from sm_common.settings import LauncherSettings
from sm_ui.tui.headless import HeadlessSelector
from sm_ui.tui.selector import MenuSelector
from sm_ui.wiring.dependencies import LauncherContext

pytestmark = pytest.mark.unit_ui


def test_headless_context_builds_scripted_selector(sample_tree) -> None:
    ctx = LauncherContext(headless=True, picks=["A"])
    selector = ctx.selector_for(sample_tree)

    assert isinstance(selector, HeadlessSelector)
    assert selector.display().leaf.label == "A"


def test_interactive_context_passes_settings(sample_tree) -> None:
    ctx = LauncherContext()
    ctx.settings = LauncherSettings(back_exits_at_root=True)

    selector = ctx.selector_for(sample_tree)

    assert isinstance(selector, MenuSelector)
    assert selector.back_exits_at_root is True


def test_executor_is_built_lazily_from_settings() -> None:
    ctx = LauncherContext()
    ctx.settings = LauncherSettings(shell="sh")
    assert ctx.executor.settings.shell == "sh"
    assert ctx.executor is ctx.executor
