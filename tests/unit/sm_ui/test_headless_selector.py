import pytest

from sm_ui.tui.headless import HeadlessSelector, RecordingPresenter, split_pick

pytestmark = pytest.mark.unit_ui


def test_split_pick() -> None:
    assert split_pick("Sub/B") == (False, ["Sub", "B"])
    assert split_pick("/Sub/B/") == (True, ["Sub", "B"])
    assert split_pick(["Sub", "B"]) == (False, ["Sub", "B"])


def test_picks_resolve_relative_to_the_last_menu(sample_tree) -> None:
    selector = HeadlessSelector(sample_tree, picks=["A", "Sub/B", "C", "../Z"])

    labels = []
    selection = selector.display(sample_tree.root)
    while selection.leaf is not None:
        labels.append(selection.leaf.label)
        selection = selector.display(selection.origin)

    assert labels == ["A", "B", "C", "Z"]
    assert selection.is_exit
    assert sample_tree.node(selector.last_menu).label == "Main"


def test_absolute_pick_starts_at_root(sample_tree) -> None:
    selector = HeadlessSelector(sample_tree, picks=["/A"])
    selection = selector.display(sample_tree.find_path(["Sub"]))
    assert selection.leaf.label == "A"


def test_branch_pick_selects_first_leaf(sample_tree) -> None:
    selector = HeadlessSelector(sample_tree, picks=["Sub"])
    selection = selector.display()
    assert selection.leaf.label == "B"
    assert sample_tree.node(selection.origin).label == "Sub"


def test_unknown_pick_exits(sample_tree, caplog) -> None:
    selector = HeadlessSelector(sample_tree, picks=["Nope", "A"])
    selection = selector.display()

    assert selection.is_exit
    assert "does not match" in caplog.text
    assert len(selector.history) == 1


def test_no_picks_exits_immediately(sample_tree) -> None:
    selection = HeadlessSelector(sample_tree).display()
    assert selection.is_exit
    assert selection.origin == sample_tree.root


def test_recording_presenter_keeps_messages() -> None:
    presenter = RecordingPresenter()
    presenter.line("running… ls", "dim italic")
    presenter.line()

    assert presenter.messages == ["LINE[dim italic]: running… ls", "LINE[]: "]
