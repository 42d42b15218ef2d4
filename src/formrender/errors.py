from __future__ import annotations


class FormRenderError(ValueError):
    """Base class for errors raised while turning a descriptor into markup."""


class InvalidSizeFormat(FormRenderError):
    """A textarea `size` that is not a `rows,cols` pair."""

    def __init__(self, size: str) -> None:
        self.size = size
        super().__init__(f"textarea size must be 'rows,cols', got {size!r}")
