from __future__ import annotations

import hmac

from fastapi import HTTPException, Security, Depends
from fastapi.security import APIKeyHeader

from .settings import Settings, get_settings

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject requests whose ``x-api-key`` header does not match the configured key."""
    if not x_api_key or not hmac.compare_digest(x_api_key, settings.api_key):
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})
