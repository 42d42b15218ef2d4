"""
One renderer per field kind.

Every renderer returns the markup for the control itself (what goes inside the
`form-field` div), one tab-indented line per element. Values are interpolated
verbatim; nothing is escaped.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping

from formrender.errors import InvalidSizeFormat
from formrender.schemas.fields import FieldDescriptor, FieldType

_INDENT = "\t\t\t"


def _extra(attributes: str) -> str:
    return f" {attributes}" if attributes else ""


def _attr(key: str, value: str) -> str:
    return f' {key}="{value}"' if value != "" else ""


def _input(kind: str, name: str, value: str, *, size: str = "", extra: str = "") -> str:
    return (
        f'{_INDENT}<input type="{kind}" name="{name}" id="{name}" value="{value}"'
        f'{_attr("size", size)}{_extra(extra)} />\n'
    )


def split_textarea_size(size: str) -> tuple[str, str]:
    """
    Parse a textarea size of the form "rows,cols".

    Raises InvalidSizeFormat unless there are exactly two non-empty parts.
    """
    parts = [p.strip() for p in size.split(",")]
    if len(parts) != 2 or not all(parts):
        raise InvalidSizeFormat(size)
    return parts[0], parts[1]


def render_text(name: str, value: str = "", size: str = "", extra: str = "") -> str:
    return _input("text", name, value, size=size, extra=extra)


def render_textarea(name: str, value: str = "", size: str = "", extra: str = "") -> str:
    dims = ""
    if size:
        rows, cols = split_textarea_size(size)
        dims = f' rows="{rows}" cols="{cols}"'
    return f'{_INDENT}<textarea name="{name}" id="{name}"{dims}{_extra(extra)}>{value}</textarea>\n'


def render_select(name: str, value: str = "", choices: Mapping[str, str] | None = None, extra: str = "") -> str:
    lines = [f'{_INDENT}<select name="{name}" id="{name}"{_extra(extra)}>\n']
    for choice, label in (choices or {}).items():
        selected = ' selected="true"' if choice == value else ""
        lines.append(f'{_INDENT}\t<option value="{choice}"{selected}>{label}</option>\n')
    lines.append(f"{_INDENT}</select>\n")
    return "".join(lines)


def render_radio(name: str, value: str = "", choices: Mapping[str, str] | None = None, extra: str = "") -> str:
    lines = []
    for choice, label in (choices or {}).items():
        item_id = f"{name}[{choice}]"
        checked = ' checked="true"' if choice == value else ""
        lines.append(
            f'{_INDENT}<input type="radio" name="{name}" id="{item_id}"{_extra(extra)} value="{choice}"{checked} />'
            f'<label for="{item_id}">{label}</label><br />\n'
        )
    return "".join(lines)


def render_checkbox(name: str, value: str = "", choices: Mapping[str, str] | None = None, extra: str = "") -> str:
    # Each box gets its own array-style name so several can be ticked at once.
    lines = []
    for choice, label in (choices or {}).items():
        item_id = f"{name}[{choice}]"
        checked = ' checked="checked"' if choice == value else ""
        lines.append(
            f'{_INDENT}<input type="checkbox" name="{item_id}" id="{item_id}"{_extra(extra)}{checked} />'
            f'<label for="{item_id}">{label}</label><br />\n'
        )
    return "".join(lines)


def render_hidden(name: str, value: str = "") -> str:
    return _input("hidden", name, value)


def render_password(name: str, value: str = "", size: str = "", extra: str = "") -> str:
    return _input("password", name, value, size=size, extra=extra)


def render_file(name: str, value: str = "", size: str = "", extra: str = "") -> str:
    return _input("file", name, value, size=size, extra=extra)


def render_submit(name: str, value: str = "", extra: str = "") -> str:
    return _input("submit", name, value, extra=extra)


def render_reset(name: str, value: str = "", extra: str = "") -> str:
    return _input("reset", name, value, extra=extra)


Renderer = Callable[[FieldDescriptor], str]

RENDERERS: Dict[FieldType, Renderer] = {
    FieldType.TEXT: lambda f: render_text(f.name, f.value, f.size, f.extra_attributes),
    FieldType.TEXTAREA: lambda f: render_textarea(f.name, f.value, f.size, f.extra_attributes),
    FieldType.SELECT: lambda f: render_select(f.name, f.value, f.choices, f.extra_attributes),
    FieldType.RADIO: lambda f: render_radio(f.name, f.value, f.choices, f.extra_attributes),
    FieldType.CHECKBOX: lambda f: render_checkbox(f.name, f.value, f.choices, f.extra_attributes),
    FieldType.HIDDEN: lambda f: render_hidden(f.name, f.value),
    FieldType.PASSWORD: lambda f: render_password(f.name, f.value, f.size, f.extra_attributes),
    FieldType.FILE: lambda f: render_file(f.name, f.value, f.size, f.extra_attributes),
    FieldType.SUBMIT: lambda f: render_submit(f.name, f.value, f.extra_attributes),
    FieldType.RESET: lambda f: render_reset(f.name, f.value, f.extra_attributes),
}
