"""Service configuration: YAML loader and Pydantic model for endpoints."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from citefetch.core.errors import ConfigError

DEFAULT_SEARCH_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"
DEFAULT_RECORD_BASE = "https://www.bioinformatics.org/texmed/cgi-bin/query.cgi"
DEFAULT_TIMEOUT = 10.0

CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "services.yaml"


# ── Service Endpoints ────────────────────────────────────────────────


class ServiceConfig(BaseModel):
    """Fixed endpoint configuration shared by every retrieval call."""

    search_base: str = DEFAULT_SEARCH_BASE
    record_base: str = DEFAULT_RECORD_BASE
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds"
    )
    user_agent: str = "citefetch/0.1"
    tool: Optional[str] = Field(
        default=None, description="NCBI E-utilities 'tool' parameter"
    )
    email: Optional[str] = Field(
        default=None, description="NCBI E-utilities 'email' parameter"
    )

    model_config = {"frozen": True}

    @field_validator("search_base", "record_base")
    @classmethod
    def http_url(cls, v: str) -> str:
        v = v.strip().rstrip("?")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Service base must be an http(s) URL: {v!r}")
        return v


# ── Loader ───────────────────────────────────────────────────────────


def load_service_config(path: str | Path | None = None) -> ServiceConfig:
    """Load endpoint settings from YAML; missing keys keep their defaults."""
    path = Path(path) if path is not None else CONFIG_PATH
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read service config {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Service config {path} must be a mapping")

    try:
        return ServiceConfig.model_validate(raw)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid service config {path}: {exc}") from exc
