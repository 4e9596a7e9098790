"""Outcome of a single forward attempt.

A forward either completes (the upstream answered, whatever the status)
or fails in transport (no answer at all). Non-2xx answers are NOT failures
here; the caller decides what they mean.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class CompletedExchange:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def envelope(self) -> dict[str, Any]:
        """The `{status, headers, data}` shape relayed to callers."""
        return {"status": self.status, "headers": self.headers, "data": self.body}


@dataclass(frozen=True)
class TransportFailure:
    reason: str
    error_type: str = "TransportError"


ForwardOutcome = Union[CompletedExchange, TransportFailure]
