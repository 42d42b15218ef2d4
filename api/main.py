from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY, HTTP_500_INTERNAL_SERVER_ERROR


def _repo_root() -> Path:
    # `api/main.py` lives at `<repo>/api/main.py`
    return Path(__file__).resolve().parents[1]


def _ensure_src_on_path() -> None:
    src = _repo_root() / "src"
    if not src.is_dir():
        return
    s = str(src)
    if s not in sys.path:
        sys.path.insert(0, s)


_ensure_src_on_path()

from api.config import Settings  # noqa: E402
from api.errors import error_envelope  # noqa: E402
from api.http_logging import install_http_logging  # noqa: E402
from api.routes import form, health  # noqa: E402
from formrender import FormRenderError  # noqa: E402

logger = logging.getLogger("api")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        # Load `.env` + `.env.local` when present (local dev convenience).
        load_dotenv(_repo_root() / ".env", override=False)
        load_dotenv(_repo_root() / ".env.local", override=False)
        settings = Settings.from_env()

    logger.setLevel(settings.log_level)

    app = FastAPI(title="formrender")
    app.state.settings = settings

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        envelope = error_envelope(
            "validation_error",
            "Request body did not match expected schema.",
            prefix="val",
            details=jsonable_encoder(exc.errors()),
        )
        logger.info("422 validation_error requestId=%s path=%s", envelope["requestId"], request.url.path)
        return JSONResponse(status_code=HTTP_422_UNPROCESSABLE_ENTITY, content=envelope)

    @app.exception_handler(FormRenderError)
    async def _render_error_handler(request: Request, exc: FormRenderError) -> JSONResponse:
        envelope = error_envelope("invalid_field", str(exc), prefix="val")
        logger.info("422 invalid_field requestId=%s path=%s err=%s", envelope["requestId"], request.url.path, exc)
        return JSONResponse(status_code=HTTP_422_UNPROCESSABLE_ENTITY, content=envelope)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        envelope = error_envelope("internal_error", "Unhandled server error.")
        logger.exception("500 internal_error requestId=%s path=%s", envelope["requestId"], request.url.path)
        return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=envelope)

    app.include_router(health.router)
    app.include_router(form.router)
    install_http_logging(app, settings)
    return app


app = create_app()
