from __future__ import annotations

import pytest

from html_data.controls import Checkbox
from html_data.errors import InvalidArgumentError, MissingKeyError

OPTIONS = [
    {"value": "value1", "text": "Text 1"},
    {"value": "value2", "text": "Text 2"},
    {"value": "value3", "text": "Text 3"},
]


def test_single_checkbox() -> None:
    assert Checkbox("agree").render("yes", "I agree") == (
        '<label><input type="checkbox" name="agree" value="yes" />I agree</label>'
    )


def test_truthy_third_argument_checks_the_box() -> None:
    assert Checkbox("agree").render("yes", "I agree", True) == (
        '<label><input type="checkbox" name="agree" value="yes" checked="checked" />I agree</label>'
    )


def test_input_attribute_mapping_drops_reserved() -> None:
    html = Checkbox("agree").render("yes", "I agree", {"name": "x", "value": "no", "class": "cb"})
    assert html == '<label><input type="checkbox" name="agree" value="yes" class="cb" />I agree</label>'


def test_instance_label_attributes_take_precedence() -> None:
    box = Checkbox("agree")
    box.set_label_attributes({"class": "fixed"})
    html = box.render("yes", "I agree", None, {"class": "call", "id": "l1"})
    assert html.startswith('<label class="fixed" id="l1">')


def test_instance_input_attributes_are_overridden_per_call() -> None:
    box = Checkbox("agree")
    box.set_input_attributes({"class": "base", "type": "radio"})
    assert box.input_attributes == {"class": "base"}
    assert 'class="call"' in box.render("yes", "I agree", {"class": "call"})


def test_render_list_with_checked_values() -> None:
    box = Checkbox("name")
    box.set_checked(["value1", "value3"])
    html = box.render_list(OPTIONS, "value", "text")

    assert html == (
        '<label><input type="checkbox" name="name[]" value="value1" checked="checked" />Text 1</label>'
        '<label><input type="checkbox" name="name[]" value="value2" />Text 2</label>'
        '<label><input type="checkbox" name="name[]" value="value3" checked="checked" />Text 3</label>'
    )


def test_render_list_extra_keys_become_input_attributes() -> None:
    html = Checkbox("tags").render_list([{"id": 1, "label": "Red", "class": "warm"}], "id", "label", "<br>")
    assert html == '<label><input type="checkbox" name="tags[]" value="1" class="warm" />Red</label>'


def test_render_list_non_string_separator_returns_list() -> None:
    items = Checkbox("name").render_list(OPTIONS, "value", "text", None)
    assert isinstance(items, list)
    assert len(items) == 3


def test_render_list_missing_key() -> None:
    with pytest.raises(MissingKeyError, match="Could not find key 'text' for option '1' in the options array."):
        Checkbox("name").render_list([{"value": 1, "text": "a"}, {"value": 2}], "value", "text")


def test_checked_values_compare_as_markup_strings() -> None:
    box = Checkbox("n")
    box.set_checked([2, "2"])
    assert box.checked == ["2"]
    assert 'checked="checked"' in box.render(2, "Two")


def test_argument_validation() -> None:
    with pytest.raises(InvalidArgumentError, match="Expecting scalar for value parameter, None given."):
        Checkbox("n").render(None, "x")
    with pytest.raises(InvalidArgumentError, match="Expecting scalar for text parameter, list given."):
        Checkbox("n").render("v", ["x"])
    with pytest.raises(InvalidArgumentError, match="checked value at index 1, float given."):
        Checkbox("n").set_checked(["a", 1.5])
