from __future__ import annotations

import time
import uuid
from typing import Any, Dict


def request_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def error_envelope(error: str, message: str, *, prefix: str = "err", **extra: Any) -> Dict[str, Any]:
    """The `{ok: false, ...}` body every failing endpoint returns."""
    return {"ok": False, "error": error, "message": message, "requestId": request_id(prefix), **extra}
