import re

import pytest

from services.config import WorkspaceNameRule
from services.workspace_names import Failed, Named, Unnamed, infer_workspace_name


def test_empty_workspace_is_unnamed():
    assert infer_workspace_name([], [], "1") == Unnamed()


def test_most_matching_rule_wins():
    result = infer_workspace_name(
        ["Google Chrome", "Google Chrome", "Visual Studio Code"],
        ["chrome", "chrome", "code"],
        "2",
    )
    assert result == Named("Browser")


def test_app_name_is_matched_too():
    result = infer_workspace_name(["Slack"], ["electron"], "3")
    assert result == Named("Chat")


def test_ties_go_to_first_rule():
    rules = [WorkspaceNameRule(name="A", patterns=("foo",)), WorkspaceNameRule(name="B", patterns=("bar",))]
    assert infer_workspace_name(["", ""], ["bar", "foo"], "1", rules) == Named("A")


def test_no_match_is_unnamed():
    assert infer_workspace_name(["Thing"], ["thing.exe"], "1") == Unnamed()


def test_invalid_pattern_fails():
    result = infer_workspace_name(["x"], ["x"], "1", [WorkspaceNameRule(name="Bad", patterns=("(",))])
    assert isinstance(result, Failed)
    assert isinstance(result.error, re.error)


def test_mismatched_inputs_fail():
    result = infer_workspace_name(["a", "b"], ["a"], "9")
    assert isinstance(result, Failed)
    with pytest.raises(ValueError, match="workspace 9"):
        raise result.error


@pytest.mark.parametrize(
    "app, process",
    [
        ("jobs.txt", "notepad.exe"),
        ("Operator", "acrord32.exe"),
        ("Citizen", "winword.exe"),
        ("Notepad", "notepad.exe"),
    ],
)
def test_default_rules_match_from_the_start(app, process):
    assert infer_workspace_name([app], [process], "1") == Unnamed()


def test_default_rules_match_app_names():
    result = infer_workspace_name(["Visual Studio Code"], ["electron"], "1")
    assert result == Named("Code")
