"""value_core: dynamically-typed recursive value container."""

import logging

from .errors import AccessError, ChildError, MethodError, ValueCoreError
from .formatter import format_value, write_value
from .kinds import Kind, kind_name
from .path import Path
from .text import NPOS
from .values import MAX_SIZE, Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Value",
    "Path",
    "Kind",
    "kind_name",
    "ValueCoreError",
    "AccessError",
    "ChildError",
    "MethodError",
    "NPOS",
    "MAX_SIZE",
    "format_value",
    "write_value",
]
