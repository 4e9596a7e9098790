"""Caller-facing errors raised by the gateway."""

from __future__ import annotations

from typing import Any


class ClientError(Exception):
    """A request the caller got wrong. Rendered as ``{"error": message}``."""

    status_code = 400

    def __init__(self, message: str, *, status_code: int | None = None, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingFieldError(ClientError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} is required")
        self.field_name = field_name


class UnauthorizedError(ClientError):
    status_code = 401

    def __init__(self, header_name: str = "x-api-key") -> None:
        super().__init__("Unauthorized")
        self.header_name = header_name

    def to_body(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "message": f"Invalid or missing API key. Please provide valid {self.header_name} header.",
        }


class PayloadTooLargeError(ClientError):
    status_code = 413

    def __init__(self) -> None:
        super().__init__("Request body too large")


class GatewayCallError(Exception):
    """The orchestrator could not complete a call to the gateway."""
