"""
Renders CoolData value trees back into CoolData source text.

This module defines the `Renderer` class, used by `render()`, `dump()` and the
command line tool to turn a parsed (or programmatically built) `CoolObject` back
into text.

Output format:
    - One `name = value` line per field.
    - Objects render as a `{ ... }` block with their fields indented one level.
    - Lists render bracketed and comma-separated on one line: `[1, 2, "three"]`.
    - Strings render between double quotes exactly as stored.
    - Floats render as the shortest positional text (always with a `.`) that
      reads back as the same 32-bit value, so they scan back as FLOAT tokens
      (`1e-07` renders as `0.0000001`, `1e+20` as `100000000000000000000.0`).

Field order follows the object's insertion order; it carries no meaning.

Rendering never fails, but some programmatically built values have no CoolData
spelling and will not parse back: negative numbers, infinities and NaN, strings
containing `"` or a newline, and field names that are not purely alphabetic.
"""

import math
from decimal import Decimal

from cooldata.cooldata_value import CoolList, CoolObject, Value, to_float32


class Renderer:
    """Renders CoolData values as source text.

    Attributes:
        lines (list[str]): Accumulated output lines.
        indent (int): Current indentation level.
        indent_unit (str): Text emitted once per indentation level.
    """

    def __init__(self, indent_unit: str = "  ") -> None:
        self.lines: list[str] = []
        self.indent = 0
        self.indent_unit = indent_unit

    def indent_str(self) -> str:
        return self.indent_unit * self.indent

    def get_output(self) -> str:
        """Returns the rendered document, one field per line with a trailing newline."""
        return "".join(f"{line}\n" for line in self.lines)

    def render_document(self, obj: CoolObject) -> str:
        self.lines = []
        self.indent = 0
        for name, value in obj.items():
            self.lines.append(f"{self.indent_str()}{name} = {self.render_value(value)}")
        return self.get_output()

    def render_value(self, value: Value) -> str:
        """Dispatches to the `render_<kind>` method for the value's variant."""
        method = getattr(self, f"render_{value.kind.value}")
        return method(value.data)

    def render_int(self, data: int) -> str:
        return str(data)

    def render_float(self, data: float) -> str:
        return format_float(data)

    def render_string(self, data: str) -> str:
        return f'"{data}"'

    def render_object(self, data: CoolObject) -> str:
        outer = self.indent_str()
        self.indent += 1
        inner = self.indent_str()
        body = [f"{inner}{name} = {self.render_value(v)}\n" for name, v in data.items()]
        self.indent -= 1
        return "{\n" + "".join(body) + outer + "}"

    def render_list(self, data: CoolList) -> str:
        return "[" + ", ".join(self.render_value(item) for item in data) + "]"


def format_float(data: float) -> str:
    """Formats a float as the shortest text that reads back as the same 32-bit value.

    The text is positional and always contains a `.`.
    """
    value = to_float32(data)
    if math.isinf(value) or math.isnan(value):
        return repr(value)
    for digits in range(1, 10):
        text = f"{value:.{digits}g}"
        if to_float32(float(text)) == value:
            break
    text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def render(obj: CoolObject, indent_unit: str = "  ") -> str:
    """Renders a document object as CoolData source text.

    Args:
        obj: The document to render.
        indent_unit: Text used for one level of indentation inside objects.

    Returns:
        The rendered text; empty for an empty object.
    """
    return Renderer(indent_unit).render_document(obj)


__all__ = ["Renderer", "format_float", "render"]
