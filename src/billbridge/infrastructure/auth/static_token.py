from __future__ import annotations


class StaticTokenProvider:
    """Hands out a pre-issued access token (e.g. from BILLBRIDGE_ACCOUNTING_ACCESS_TOKEN)."""

    def __init__(self, token: str | None) -> None:
        self.token = token

    def get_access_token(self) -> str:
        if not self.token:
            raise ValueError("No accounting access token configured")
        return self.token
