"""Form control builders."""
from __future__ import annotations

from .checkbox import Checkbox
from .form import Form
from .input import INPUT_TYPES, Input
from .radio import Radio
from .select import Select
from .textbox import Textbox

__all__ = [
    "Checkbox",
    "Form",
    "INPUT_TYPES",
    "Input",
    "Radio",
    "Select",
    "Textbox",
]
