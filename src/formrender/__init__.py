"""
HTML form rendering helpers.

Turns declarative field/form descriptors into `div`-wrapped `<form>` markup.

- Descriptors: `formrender.schemas.fields`
- Per-kind renderers: `formrender.renderers`
- Form/field entry points: `formrender.builder`
"""

from formrender.builder import close_form, render_field, render_form
from formrender.errors import FormRenderError, InvalidSizeFormat
from formrender.schemas.fields import FieldDescriptor, FieldType, FormDescriptor, coerce_field

__all__ = [
    "FieldDescriptor",
    "FieldType",
    "FormDescriptor",
    "FormRenderError",
    "InvalidSizeFormat",
    "close_form",
    "coerce_field",
    "render_field",
    "render_form",
]
