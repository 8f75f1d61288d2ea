"""
Configuration models for the Xero client.

ApplicationConfig carries everything the Application needs to build URLs and
dispatch requests. RequestDefaults holds the per-request defaults (Accept and
Content-Type) that every Request receives at construction time.
"""

from __future__ import annotations
from typing import Dict, Any
from pydantic import BaseModel, Field, field_validator

from ._version import __version__

CONTENT_TYPE_HTML = "text/html"
CONTENT_TYPE_XML = "text/xml"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_PDF = "application/pdf"

API_CORE = "api.xro"
API_PAYROLL = "payroll.xro"
API_FILE = "files.xro"
API_ASSETS = "assets.xro"

DEFAULT_API_VERSIONS = {
    API_CORE: "2.0",
    API_PAYROLL: "1.0",
    API_FILE: "1.0",
    API_ASSETS: "1.0",
}


class RequestDefaults(BaseModel):
    """
    Defaults applied to every outgoing request.

    XML is the default for both directions: only the XML encoding carries the
    type discriminator attribute on the response's root element.
    """
    accept: str = Field(default=CONTENT_TYPE_XML, min_length=1, description="Accept header value")
    content_type: str = Field(default=CONTENT_TYPE_XML, min_length=1, description="Default body content type")

    model_config = {"frozen": True}


class ApplicationConfig(BaseModel):
    """Configuration for a Xero Application."""
    base_url: str = Field(default="https://api.xero.com/", description="API host")
    api_versions: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_API_VERSIONS))
    timeout: float = Field(default=30.0, gt=0, description="Transport timeout in seconds")
    verify_ssl: bool = True
    user_agent: str = f"xero-client-python/{__version__}"
    debug: bool = False
    request_defaults: RequestDefaults = Field(default_factory=RequestDefaults)

    model_config = {"populate_by_name": True}

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and normalize the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/") + "/"

    @field_validator('api_versions', mode='before')
    @classmethod
    def merge_api_versions(cls, v: Any) -> Dict[str, str]:
        """Overlay the given versions on top of the defaults."""
        if v is None:
            return dict(DEFAULT_API_VERSIONS)
        if not isinstance(v, dict):
            raise ValueError(f"api_versions must be a mapping, got {type(v)}")
        merged = dict(DEFAULT_API_VERSIONS)
        merged.update({str(stem): str(version) for stem, version in v.items()})
        return merged

    def get_api_version(self, api_stem: str) -> str:
        """Version segment for an API stem; unknown stems fall back to the core version."""
        return self.api_versions.get(api_stem, self.api_versions[API_CORE])


__all__ = [
    "CONTENT_TYPE_HTML",
    "CONTENT_TYPE_XML",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_PDF",
    "API_CORE",
    "API_PAYROLL",
    "API_FILE",
    "API_ASSETS",
    "DEFAULT_API_VERSIONS",
    "RequestDefaults",
    "ApplicationConfig",
]
