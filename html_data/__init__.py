"""html_data: render HTML tables, forms and form controls from plain data."""
from __future__ import annotations

import logging

from .attributes import format_attributes, validate_attributes
from .config import Config, ConfigError, TableSettings, load_config
from .controls import Checkbox, Form, Input, Radio, Select, Textbox
from .errors import (
    CellTypeError,
    HtmlDataError,
    InvalidArgumentError,
    InvalidAttributeNameError,
    InvalidAttributeValueError,
    MissingColumnError,
    MissingKeyError,
)
from .records import coerce_rows, column_names, table_to_records
from .table import TableConfig, TableRenderer

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CellTypeError",
    "Checkbox",
    "Config",
    "ConfigError",
    "Form",
    "HtmlDataError",
    "Input",
    "InvalidArgumentError",
    "InvalidAttributeNameError",
    "InvalidAttributeValueError",
    "MissingColumnError",
    "MissingKeyError",
    "Radio",
    "Select",
    "TableConfig",
    "TableRenderer",
    "TableSettings",
    "Textbox",
    "__version__",
    "coerce_rows",
    "column_names",
    "format_attributes",
    "load_config",
    "table_to_records",
    "validate_attributes",
]
