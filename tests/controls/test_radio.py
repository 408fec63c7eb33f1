from __future__ import annotations

import pytest

from html_data.controls import Radio
from html_data.errors import InvalidArgumentError, MissingKeyError

OPTIONS = [
    {"val": "s", "txt": "Small"},
    {"val": "m", "txt": "Medium", "class": "default"},
]


def test_radio_group_with_checked_option() -> None:
    radio = Radio("size")
    radio.set_checked("m")
    html = radio.render(OPTIONS, "val", "txt", "\n")

    assert html == (
        '<label><input type="radio" name="size" value="s" />Small</label>\n'
        '<label class="default"><input type="radio" name="size" value="m" checked="checked" />Medium</label>'
    )


def test_option_label_attributes_override_instance_ones() -> None:
    radio = Radio("size")
    radio.set_label_attributes({"class": "base", "title": "t"})
    html = radio.render(OPTIONS, "val", "txt")
    assert '<label class="base" title="t"><input' in html
    assert '<label class="default" title="t"><input' in html


def test_input_attributes_drop_reserved_names() -> None:
    radio = Radio("size")
    radio.set_input_attributes({"checked": "checked", "value": "x", "required": None})
    assert radio.input_attributes == {"required": None}
    assert '<input type="radio" name="size" value="s" required="" />' in radio.render(OPTIONS, "val", "txt")


def test_missing_option_key() -> None:
    with pytest.raises(MissingKeyError, match="Key txt was not set for option 0."):
        Radio("size").render([{"val": "s"}], "val", "txt")


def test_option_values_must_be_non_empty_strings() -> None:
    with pytest.raises(InvalidArgumentError, match="non-empty string for value attribute, int given."):
        Radio("size").render([{"val": 1, "txt": "One"}], "val", "txt")
    with pytest.raises(InvalidArgumentError, match="non-empty string for text attribute, str given."):
        Radio("size").render([{"val": "1", "txt": ""}], "val", "txt")


def test_argument_validation() -> None:
    with pytest.raises(InvalidArgumentError, match="Expecting string for value parameter, int given."):
        Radio("size").render(OPTIONS, 1, "txt")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="Expecting a sequence of option mappings"):
        Radio("size").render(["s"], "val", "txt")
    with pytest.raises(InvalidArgumentError, match="Expecting string for checked option value, int given."):
        Radio("size").set_checked(1)  # type: ignore[arg-type]
