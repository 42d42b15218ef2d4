"""
Form and field entry points.

Layout produced for one non-hidden field:

    <div class="form-row {type}">
        <div class="form-label">
            <label for="{name}"[ class="required"]>{description}</label>:
            [<div class="helptext">{help_text}</div>]
        </div>
        <div class="form-field">
            {renderer output}
        </div>
    </div>

Hidden fields skip the `form-label` block entirely.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from formrender.renderers import RENDERERS
from formrender.schemas.fields import FieldDescriptor, FieldType, FormDescriptor, coerce_field

logger = logging.getLogger(__name__)

FieldInput = Union[FieldDescriptor, Mapping[str, Any], Sequence[Any]]


def _label_block(field: FieldDescriptor) -> str:
    out = '\t\t<div class="form-label">\n'
    if field.description:
        required = ' class="required"' if field.required else ""
        out += f'\t\t\t<label for="{field.name}"{required}>{field.description}</label>:\n'
    if field.help_text:
        out += f'\t\t\t<div class="helptext">{field.help_text}</div>\n'
    out += "\t\t</div>\n"
    return out


def render_field(field: FieldInput) -> str:
    """
    Render one field row.

    Accepts a FieldDescriptor, a mapping of named options, or a positional
    sequence (see `coerce_field`). An unrecognized `type` still renders the
    row and label, with an empty `form-field` div.
    """
    field = coerce_field(field)
    out = f'\t<div class="form-row {field.type}">\n'
    if field.type != FieldType.HIDDEN.value:
        out += _label_block(field)
    out += '\t\t<div class="form-field">\n'
    kind = field.field_type
    if kind is None:
        logger.debug("no renderer for field type %r (field %r); emitting label only", field.type, field.name)
    else:
        out += RENDERERS[kind](field)
    out += "\t\t</div>\n"
    out += "\t</div>\n"
    return out


def open_form(form: FormDescriptor) -> str:
    action = f' action="{form.action}"' if form.action else ""
    extra = f" {form.extra_attributes}" if form.extra_attributes else ""
    return f'<form name="{form.name}" id="{form.name}" method="{form.method}"{action}{extra}>\n'


def close_form() -> str:
    return "</form>\n"


def render_form(form: Union[FormDescriptor, Mapping[str, Any]]) -> str:
    """
    Render a whole form.

    With no fields only the opening tag is returned, so callers can write their
    own field markup and finish with `close_form()`. The closing tag is also
    left off when `emit_closing_tag` is false.
    """
    if not isinstance(form, FormDescriptor):
        form = FormDescriptor.model_validate(dict(form))
    parts = [open_form(form)]
    parts.extend(render_field(field) for field in form.fields)
    if form.fields and form.emit_closing_tag:
        parts.append(close_form())
    return "".join(parts)
