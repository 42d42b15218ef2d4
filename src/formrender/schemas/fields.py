"""
Descriptor models for form rendering.

A `FieldDescriptor` describes one control; a `FormDescriptor` wraps an ordered
list of them. Both are built right before rendering and never mutated.

Nothing here escapes HTML: names, values, labels, choices and extra
attributes are interpolated into the markup verbatim, so callers must
pre-sanitize untrusted text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    HIDDEN = "hidden"
    PASSWORD = "password"
    FILE = "file"
    SUBMIT = "submit"
    RESET = "reset"


# Order of the positional question arrays: (name, description, type, required,
# value, choices, size, args, helptext). Shorter sequences are padded with None;
# None and "" both mean "not given" for required, choices and closingTag.
POSITIONAL_FIELD_ORDER = (
    "name",
    "description",
    "type",
    "required",
    "value",
    "choices",
    "size",
    "extra_attributes",
    "help_text",
)


def _text(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, Enum):
        return str(v.value)
    return str(v)


class FieldDescriptor(BaseModel):
    name: str = Field(..., description="Input name; also used as the element id")
    description: str = Field(default="", description="Label text; empty means no <label>")
    type: str = Field(..., description="Field kind (see FieldType); unknown kinds render the label only")
    required: bool = False
    value: str = Field(default="", description="Initial value, or the selected/checked choice key")
    choices: Dict[str, str] = Field(
        default_factory=dict,
        description="Ordered value -> label mapping for select, radio and checkbox",
    )
    size: str = Field(default="", description="Input width, or 'rows,cols' for textarea")
    extra_attributes: str = Field(
        default="",
        validation_alias=AliasChoices("extra_attributes", "extraAttributes", "args"),
        description="Raw attribute text appended inside the tag (e.g. onchange handlers)",
    )
    help_text: str = Field(
        default="",
        validation_alias=AliasChoices("help_text", "helpText", "helptext"),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("name", "description", "type", "value", "size", "extra_attributes", "help_text", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> str:
        return _text(v)

    @field_validator("required", mode="before")
    @classmethod
    def _required_default(cls, v: Any) -> Any:
        return False if v is None or v == "" else v

    @field_validator("choices", mode="before")
    @classmethod
    def _normalize_choices(cls, v: Any) -> Any:
        if v is None or v == "":
            return {}
        if isinstance(v, Mapping):
            return {_text(k): _text(label) for k, label in v.items()}
        if isinstance(v, (list, tuple)):
            # A bare list of labels is keyed by position, like a PHP list.
            return {str(i): _text(label) for i, label in enumerate(v)}
        return v

    @property
    def field_type(self) -> FieldType | None:
        """The recognized kind, or None when `type` is not one of FieldType."""
        try:
            return FieldType(self.type)
        except ValueError:
            return None


def coerce_field(raw: Any) -> FieldDescriptor:
    """
    Normalize one field definition into a `FieldDescriptor`.

    Accepts:
      - a `FieldDescriptor` (returned as-is)
      - a mapping of named options (`{"name": ..., "type": ...}`)
      - a positional sequence in `POSITIONAL_FIELD_ORDER`, padded with None
    """
    if isinstance(raw, FieldDescriptor):
        return raw
    if isinstance(raw, Mapping):
        return FieldDescriptor.model_validate(dict(raw))
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        items = list(raw)
        if len(items) > len(POSITIONAL_FIELD_ORDER):
            raise ValueError(
                f"positional field has {len(items)} items; at most {len(POSITIONAL_FIELD_ORDER)} are supported"
            )
        items += [None] * (len(POSITIONAL_FIELD_ORDER) - len(items))
        return FieldDescriptor.model_validate(dict(zip(POSITIONAL_FIELD_ORDER, items)))
    raise ValueError(f"cannot build a field from {type(raw).__name__}")


class FormDescriptor(BaseModel):
    name: str = Field(..., description="Form name; also used as the form id")
    fields: List[FieldDescriptor] = Field(default_factory=list)
    method: str = Field(default="post", description="Interpolated verbatim (get/post)")
    action: str = Field(default="", description="Form target; omitted from the tag when empty")
    extra_attributes: str = Field(
        default="",
        validation_alias=AliasChoices("extra_attributes", "extraAttributes", "args"),
    )
    emit_closing_tag: bool = Field(
        default=True,
        validation_alias=AliasChoices("emit_closing_tag", "emitClosingTag", "closingTag"),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("name", "action", "extra_attributes", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> str:
        return _text(v)

    @field_validator("method", mode="before")
    @classmethod
    def _method_default(cls, v: Any) -> str:
        return "post" if v is None else _text(v)

    @field_validator("emit_closing_tag", mode="before")
    @classmethod
    def _closing_default(cls, v: Any) -> Any:
        return True if v is None or v == "" else v

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_fields(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [coerce_field(item) for item in v]
        return v
