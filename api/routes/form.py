from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY

from api.errors import error_envelope
from formrender import FieldType, FormDescriptor, coerce_field, render_field, render_form

logger = logging.getLogger("api.form")

router = APIRouter(prefix="/api/form", tags=["form"])


def _invalid_body(request: Request, exc: ValidationError) -> JSONResponse:
    details = exc.errors(include_url=False, include_context=False)
    logger.info("422 validation_error path=%s errors=%s", request.url.path, details)
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_envelope(
            "validation_error",
            "Request body did not match the descriptor schema.",
            prefix="val",
            details=details,
        ),
    )


@router.get("/types")
async def field_types() -> Dict[str, Any]:
    return {"ok": True, "types": [t.value for t in FieldType]}


@router.post("/render", response_class=HTMLResponse)
async def render_form_html(request: Request, body: Dict[str, Any] = Body(...)) -> Any:
    """
    Render a whole `<form>` from a FormDescriptor payload.

    Fields may be objects or positional arrays
    `[name, description, type, required, value, choices, size, args, helptext]`.
    """
    settings = request.app.state.settings
    raw_fields = body.get("fields")
    if isinstance(raw_fields, list) and len(raw_fields) > settings.max_fields:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_envelope(
                "too_many_fields",
                f"At most {settings.max_fields} fields may be rendered per request.",
                prefix="val",
            ),
        )
    try:
        form = FormDescriptor.model_validate(body)
    except ValidationError as exc:
        return _invalid_body(request, exc)
    return HTMLResponse(content=render_form(form))


@router.post("/field", response_class=HTMLResponse)
async def render_field_html(request: Request, body: Any = Body(...)) -> Any:
    """Render one field row from a FieldDescriptor object or positional array."""
    try:
        field = coerce_field(body)
    except ValidationError as exc:
        return _invalid_body(request, exc)
    except ValueError as exc:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_envelope("validation_error", str(exc), prefix="val"),
        )
    return HTMLResponse(content=render_field(field))
