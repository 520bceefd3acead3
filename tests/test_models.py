import pytest

from pyrte.domain.errors import UnsupportedFormatCommand
from pyrte.domain.models import Document, FormatCommand, placeholder_visible


def test_document_defaults():
    d = Document()
    assert d.content == ""
    assert d.dirty is False
    assert d.is_blank is True


def test_document_mutation():
    d = Document(content="<p>hi</p>", dirty=True)
    assert d.content == "<p>hi</p>"
    assert d.dirty is True
    assert d.is_blank is False


def test_documents_are_independent():
    a, b = Document(), Document()
    a.content = "x"
    assert b.content == ""


@pytest.mark.parametrize(
    "name, expected",
    [
        ("bold", FormatCommand.BOLD),
        ("strikeThrough", FormatCommand.STRIKE_THROUGH),
        ("justifyCenter", FormatCommand.JUSTIFY_CENTER),
        ("insertUnorderedList", FormatCommand.UNORDERED_LIST),
    ],
)
def test_format_command_parse(name, expected):
    assert FormatCommand.parse(name) is expected


@pytest.mark.parametrize("name", ["", "Bold", "insertHTML", "createLink"])
def test_format_command_parse_rejects_unknown(name):
    with pytest.raises(UnsupportedFormatCommand) as exc:
        FormatCommand.parse(name)
    assert exc.value.name == name
    assert isinstance(exc.value, ValueError)


def test_every_format_command_has_a_label():
    assert all(c.label for c in FormatCommand)


@pytest.mark.parametrize(
    "text, visible",
    [("", True), ("   \n\t", True), ("a", False), ("  a  ", False)],
)
def test_placeholder_visible(text, visible):
    assert placeholder_visible(text) is visible
