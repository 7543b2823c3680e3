"""Pydantic models shared by the fetcher, config loader and CLI."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_ENDPOINT = "https://maps.mail.ru/osm/tools/overpass/api/interpreter"
DEFAULT_USER_AGENT = "adminbounds/0.1.0"


class FetchSettings(BaseModel):
    endpoint: str = Field(DEFAULT_ENDPOINT, description="Overpass interpreter URL")
    out_dir: str = Field(".", description="Directory the .osm files are written to")
    timeout: Optional[float] = Field(
        None, gt=0, description="Client-side timeout in seconds (None = wait forever)"
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header")

    @field_validator("endpoint")
    @classmethod
    def endpoint_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Overpass endpoint must not be empty.")
        return v.strip()


class LevelResult(BaseModel):
    """Outcome of one admin level download"""

    level: int = Field(..., description="OSM admin_level that was requested")
    path: str = Field(..., description="File the response body was written to")
    size_bytes: int = Field(..., ge=0, description="Bytes written")
    status_code: int = Field(..., description="HTTP status returned by Overpass")
    elapsed_seconds: float = Field(..., ge=0, description="Request + write time")
