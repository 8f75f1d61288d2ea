"""
Model registry.

Maps names such as ``Accounting.Contact`` (or the backslash form
``Accounting\\Contact``) to RemoteModel subclasses. A bare class name is looked
up in the default namespace.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Type, Union

from ..remote.model import RemoteModel
from ..runtime.errors import UnknownTypeError
from . import accounting


DEFAULT_NAMESPACE = "Accounting"


class ModelRegistry:
    """Known model classes, keyed by ``Namespace.ClassName``."""

    def __init__(self, default_namespace: str = DEFAULT_NAMESPACE):
        self.default_namespace = default_namespace
        self._models: Dict[str, Type[RemoteModel]] = {}

    def register(self, model_cls: Type[RemoteModel], namespace: Optional[str] = None) -> None:
        """
        Register a model class.

        Args:
            model_cls: RemoteModel subclass
            namespace: Namespace to file it under; the default one if omitted
        """
        if not (isinstance(model_cls, type) and issubclass(model_cls, RemoteModel)):
            raise TypeError(f"{model_cls!r} is not a RemoteModel subclass")
        key = f"{namespace or self.default_namespace}.{model_cls.__name__}"
        self._models[key] = model_cls

    def resolve(self, identifier: Union[str, Type[RemoteModel]]) -> Type[RemoteModel]:
        """
        Resolve an identifier to a registered model class.

        Raises:
            UnknownTypeError: If nothing matches
        """
        if isinstance(identifier, type):
            if identifier in self._models.values():
                return identifier
            raise UnknownTypeError(identifier.__name__)

        if not isinstance(identifier, str) or not identifier:
            raise UnknownTypeError(identifier)

        key = identifier.strip("\\").replace("\\", ".")
        if "." not in key:
            key = f"{self.default_namespace}.{key}"

        model_cls = self._models.get(key)
        if model_cls is None:
            raise UnknownTypeError(identifier)
        return model_cls

    def list_models(self) -> List[str]:
        return sorted(self._models)

    def __contains__(self, identifier) -> bool:
        try:
            self.resolve(identifier)
        except UnknownTypeError:
            return False
        return True


def default_registry() -> ModelRegistry:
    """A registry holding the built-in models."""
    registry = ModelRegistry()
    for model_cls in accounting.MODELS:
        registry.register(model_cls, "Accounting")
    return registry


__all__ = [
    "DEFAULT_NAMESPACE",
    "ModelRegistry",
    "default_registry",
]
