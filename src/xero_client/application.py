"""
Application context.

The Application ties together configuration, the signer used to authorize
requests, the transport that sends them and the registry of known models.
It is also the usual entry point for queries:

    app = Application(signer=BearerTokenSigner(token, tenant_id))
    contacts = app.load("Accounting.Contact").where("Name", "Foo Bar").execute()
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Type, Union
import logging

from .config import ApplicationConfig
from .models import ModelRegistry, default_registry
from .remote.model import RemoteModel
from .remote.query import Query
from .remote.request import Request
from .remote.url import URL
from .runtime.errors import NotFoundError
from .signers.signer import NullSigner, Signer
from .transport.http import RequestsTransport, Transport

logger = logging.getLogger(__name__)


class Application:
    """Configuration and collaborators shared by every request."""

    def __init__(
        self,
        config: Optional[Union[ApplicationConfig, Dict[str, Any]]] = None,
        signer: Optional[Signer] = None,
        transport: Optional[Transport] = None,
        registry: Optional[ModelRegistry] = None,
    ):
        """
        Args:
            config: ApplicationConfig, a dict of its fields, or None for defaults
            signer: Signer applied to every request; unsigned when omitted
            transport: Transport used to send requests; a requests-backed one
                built from the config when omitted
            registry: Model registry; the built-in models when omitted
        """
        if config is None:
            self.config = ApplicationConfig()
        elif isinstance(config, dict):
            self.config = ApplicationConfig(**config)
        else:
            self.config = config

        if self.config.debug:
            logging.getLogger("xero_client").setLevel(logging.DEBUG)

        self.signer = signer or NullSigner()
        self._owns_transport = transport is None
        self.transport = transport or RequestsTransport(
            timeout=self.config.timeout,
            verify_ssl=self.config.verify_ssl,
            user_agent=self.config.user_agent,
        )
        self.registry = registry or default_registry()

    def close(self) -> None:
        """Close the transport if owned by this application."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def validate_model_class(self, model: Union[str, Type[RemoteModel]]) -> Type[RemoteModel]:
        """
        Resolve a model identifier to its class.

        Raises:
            UnknownTypeError: If the identifier is not a known model
        """
        return self.registry.resolve(model)

    def load(self, model: Union[str, Type[RemoteModel]]) -> Query:
        """Start a query on a model."""
        return Query(self).from_(model)

    def load_by_guid(self, model: Union[str, Type[RemoteModel]], guid: str) -> RemoteModel:
        """
        Fetch a single object by its GUID.

        Raises:
            NotFoundError: If the API returns no matching object
        """
        model_cls = self.validate_model_class(model)
        logger.debug(f"Loading {model_cls.__name__} {guid}")
        url = URL(self, f"{model_cls.get_resource_uri()}/{guid}", model_cls.get_api_stem())
        request = Request(self, url, Request.METHOD_GET)
        response = request.send()
        response.raise_for_status()

        elements = response.get_elements()
        if not elements:
            raise NotFoundError(f"{model_cls.__name__} {guid} not found", status=response.get_status())

        built = model_cls(self)
        built.from_string_array(elements[0])
        return built


__all__ = ["Application"]
