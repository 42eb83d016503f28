"""Tests for the interactive Prompter."""

import pytest

from appimage_desktop.exceptions import UserAbortedError
from appimage_desktop.ui.prompts import Prompter


def make_prompter(answers):
    """Return a prompter reading answers in order and the output list."""
    remaining = list(answers)
    output: list[str] = []

    def read(_prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return Prompter(read, output.append), output


def test_ask_strips_whitespace():
    """Answers are stripped."""
    prompter, _ = make_prompter(["  name \n"])
    assert prompter.ask("Name: ") == "name"


def test_ask_eof_aborts():
    """End of input is a user abort."""
    prompter, _ = make_prompter([])

    with pytest.raises(UserAbortedError) as exc_info:
        prompter.ask("Name: ")

    assert str(exc_info.value) == "Aborted by user."


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("", True),
        ("y", True),
        ("YES", True),
        ("whatever", True),
        ("n", False),
        ("No", False),
    ],
)
def test_confirm_default_yes(answer, expected):
    """With default yes only an explicit no declines."""
    prompter, _ = make_prompter([answer])
    assert prompter.confirm("Try again?", default=True) is expected


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("", False), ("n", False), ("maybe", False), ("y", True), ("Yes", True)],
)
def test_confirm_default_no(answer, expected):
    """With default no only an explicit yes accepts."""
    prompter, _ = make_prompter([answer])
    assert prompter.confirm("Override?", default=False) is expected


def test_confirm_shows_hint():
    """The default is shown as (Y/n) or (y/N)."""
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        return ""

    prompter = Prompter(read, lambda _line: None)
    prompter.confirm("Try again?", default=True)
    prompter.confirm("Override?", default=False)

    assert prompts == ["Try again? (Y/n): ", "Override? (y/N): "]


def test_choose_returns_zero_based_index():
    """Menu numbers start at 1, the result at 0."""
    prompter, output = make_prompter(["2"])

    index = prompter.choose("Pick:", ["alpha", "beta"])

    assert index == 1
    assert output == ["Pick:", " 1) alpha", " 2) beta"]


def test_choose_reasks_until_valid():
    """Invalid answers are rejected without changing the menu."""
    prompter, output = make_prompter(["", "-1", "3", "x", "1"])

    assert prompter.choose("Pick:", ["a", "b"]) == 0
    assert output.count("Invalid selection. Please try again.") == 4


@pytest.mark.parametrize("answer", ["²", "①"])
def test_choose_rejects_non_decimal_digits(answer):
    """Digit-like characters that are not decimals are re-asked."""
    prompter, output = make_prompter([answer, "2"])

    assert prompter.choose("Pick:", ["a", "b", "c"]) == 1
    assert output.count("Invalid selection. Please try again.") == 1


def test_choose_aligns_numbers():
    """Numbers are right-aligned when the menu has ten or more entries."""
    prompter, output = make_prompter(["10"])

    prompter.choose("Pick:", [str(i) for i in range(10)])

    assert output[1] == "  1) 0"
    assert output[10] == " 10) 9"


def test_choose_requires_options():
    """An empty menu is a programming error."""
    prompter, _ = make_prompter([])

    with pytest.raises(ValueError, match="at least one option"):
        prompter.choose("Pick:", [])
