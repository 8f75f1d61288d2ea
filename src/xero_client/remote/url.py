"""
Endpoint URL composition: base URL + API stem + API version + resource path.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..config import API_CORE

if TYPE_CHECKING:
    from ..application import Application


class URL:
    """Address of one API endpoint."""

    def __init__(self, app: "Application", endpoint: str, api_stem: str = API_CORE):
        """
        Args:
            app: Application whose configuration supplies host and versions
            endpoint: Resource path such as ``Contacts``, or an absolute URL
            api_stem: API the resource belongs to, e.g. ``api.xro``
        """
        self._endpoint = endpoint
        self._api_stem = api_stem

        if endpoint.startswith(("http://", "https://")):
            self._full_url = endpoint
        else:
            config = app.config
            version = config.get_api_version(api_stem)
            self._full_url = f"{config.base_url}{api_stem}/{version}/{endpoint.lstrip('/')}"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def api_stem(self) -> str:
        return self._api_stem

    def get_full_url(self) -> str:
        return self._full_url

    def __str__(self) -> str:
        return self._full_url

    def __repr__(self) -> str:
        return f"URL('{self._full_url}')"


__all__ = ["URL"]
