"""Tool Result — the success value every handler returns.

Handlers return a ToolResult on success and raise a PortfolioError subclass on
failure; the dispatcher never inspects a success flag inside the payload.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToolResult:
    data: Any
    message: str | None = None
