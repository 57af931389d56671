import pytest

from gitgud_ui.branch_list import Branch, BranchList, branch_label, can_checkout


@pytest.fixture
def branches():
    return [
        Branch("main", is_current=True),
        Branch("feature/Login"),
        Branch("origin/main", is_remote=True),
        Branch("bugfix"),
    ]


def test_branch_list_new():
    branch_list = BranchList()
    assert branch_list.filter == ""
    assert branch_list.filter_visible is False


def test_toggle_filter_shows_and_hides():
    branch_list = BranchList()
    assert branch_list.toggle_filter() is True
    assert branch_list.filter_visible is True
    branch_list.filter = "main"
    assert branch_list.toggle_filter() is False
    assert branch_list.filter == ""


def test_clear_filter():
    branch_list = BranchList()
    branch_list.filter = "abc"
    branch_list.clear_filter()
    assert branch_list.filter == ""


def test_empty_filter_returns_all(branches):
    assert BranchList().filter_branches(branches) == branches


def test_filter_is_case_insensitive(branches):
    branch_list = BranchList()
    branch_list.filter = "LOGIN"
    assert [b.name for b in branch_list.filter_branches(branches)] == ["feature/Login"]


def test_filter_keeps_order(branches):
    branch_list = BranchList()
    branch_list.filter = "main"
    assert [b.name for b in branch_list.filter_branches(branches)] == ["main", "origin/main"]


def test_filter_with_no_match(branches):
    branch_list = BranchList()
    branch_list.filter = "zzz"
    assert branch_list.filter_branches(branches) == []


@pytest.mark.parametrize(
    "branch, expected",
    [
        (Branch("main", is_current=True), "🌿 main"),
        (Branch("origin/dev", is_remote=True), "🌐 origin/dev"),
        (Branch("topic"), "🌱 topic"),
        (Branch("both", is_current=True, is_remote=True), "🌿 both"),
    ],
)
def test_branch_label(branch, expected):
    assert branch_label(branch) == expected


def test_can_checkout():
    assert can_checkout(Branch("topic")) is True
    assert can_checkout(Branch("main", is_current=True)) is False