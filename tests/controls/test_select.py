from __future__ import annotations

import pytest

from html_data.controls import Select
from html_data.errors import InvalidArgumentError, MissingKeyError

OPTIONS = [
    {"id": 1, "name": "One"},
    {"id": 2, "name": "Two"},
]


def test_selection_list_default_separator() -> None:
    html = Select("number").render_list(OPTIONS, "id", "name")
    assert html == (
        '<select name="number">\n\t<option value="1">One</option>\n\t<option value="2">Two</option>\n</select>'
    )


def test_blank_option_and_selected_value() -> None:
    select = Select("number")
    assert select.set_blank() is True
    assert select.set_selected(2) is True
    html = select.render_list(OPTIONS, "id", "name", "")

    assert html == (
        '<select name="number"><option></option><option value="1">One</option>'
        '<option value="2" selected="selected">Two</option>\n</select>'
    )


def test_sequence_selection_makes_multi_select() -> None:
    select = Select("number")
    select.set_list_attributes({"class": "wide", "name": "ignored"})
    select.set_selected(["1", "2", ["nested"]])
    html = select.render_list(OPTIONS, "id", "name")

    assert html.startswith('<select name="number[]" multiple="multiple" class="wide">')
    assert html.count('selected="selected"') == 2


def test_non_string_separator_returns_list() -> None:
    parts = Select("number").render_list(OPTIONS, "id", "name", None)
    assert parts == ['<select name="number">', '<option value="1">One</option>', '<option value="2">Two</option>', "</select>"]


def test_extra_option_keys_become_attributes() -> None:
    html = Select("n").render_list([{"id": 1, "name": "One", "disabled": None}], "id", "name")
    assert '<option value="1" disabled="">One</option>' in html


def test_set_selected_ignores_none_and_false() -> None:
    select = Select("n")
    assert select.set_selected(None) is False
    assert select.set_selected(False) is False
    assert select.selected == []


def test_set_selected_rejects_other_types() -> None:
    with pytest.raises(InvalidArgumentError, match="string, integer, or sequence for selected parameter, float given."):
        Select("n").set_selected(1.5)


def test_missing_option_keys() -> None:
    with pytest.raises(MissingKeyError, match=r"Option missing value key for \(id\)."):
        Select("n").render_list([{"name": "One"}], "id", "name")
    with pytest.raises(MissingKeyError, match=r"Option missing text key for \(name\)."):
        Select("n").render_list([{"id": 1}], "id", "name")


def test_label() -> None:
    assert Select("n").label("Number", {"for": "x"}) == '<label for="n">Number</label>'
