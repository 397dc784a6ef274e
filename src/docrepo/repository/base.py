"""Repository base class.

A repository definition is a subclass of ``Repository``. Each definition is
an enforced singleton: ``MyRepository()`` raises ``InstantiationNotAllowed``
and the one instance is reached through ``MyRepository.instance()``.

Every method and property is reachable both on the class and on the
instance, and both paths act on the same configuration state:

    class People(Repository):
        collection_name = "people"
        object_class = Person

        def adults(self, *ids):
            return [p for p in self.find(*ids) if p and p.age >= 18]

    People.client(store)
    People.instance().client() is store   # True
    People.adults("1", "2") == People.instance().adults("1", "2")

Configuration may be declared in the class body (``client``,
``collection_name``, ``document_kind``, ``object_class``) and assigned on
either path (``People.document_kind = "person"``); assignment uses the
plain setter semantics of ``RepositoryConfig``.
"""

from __future__ import annotations

import functools
import threading
import types
from typing import Any

from ..core.exceptions import InstantiationNotAllowed
from ..store.ports import DocumentStoreClient
from .config import CONFIG_FIELDS, UNSET, RepositoryConfig
from .find import FindMixin
from .management import ManagementMixin
from .serialize import SerializeMixin
from .store import StoreMixin

_instance_lock = threading.Lock()


class repositorymethod:
    """Method descriptor that binds class-level access to the singleton."""

    def __init__(self, func: types.FunctionType):
        self.__func__ = func
        functools.update_wrapper(self, func)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            obj = objtype.instance()
        return types.MethodType(self.__func__, obj)


class repositoryproperty(property):
    """Property that reads from the singleton when accessed on the class."""

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            obj = objtype.instance()
        return super().__get__(obj, objtype)


def _bind_to_singleton(name: str, value: Any) -> Any:
    """Wrap a method or property so the class path reaches the singleton.

    Returns None for anything that stays as it is.
    """
    if name.startswith("__") and name.endswith("__"):
        return None
    if isinstance(value, types.FunctionType):
        return repositorymethod(value)
    if isinstance(value, property) and not isinstance(value, repositoryproperty):
        return repositoryproperty(value.fget, value.fset, value.fdel, value.__doc__)
    return None


class RepositoryMeta(type):
    """Metaclass for repository definitions."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any):
        is_definition = any(isinstance(base, RepositoryMeta) for base in bases)

        declared: dict[str, Any] = {}
        for base in reversed(bases):
            declared.update(getattr(base, "_declared", {}))
        if is_definition:
            for field_name in CONFIG_FIELDS:
                if field_name in namespace:
                    declared[field_name] = namespace.pop(field_name)

        for attr, value in list(namespace.items()):
            if (bound := _bind_to_singleton(attr, value)) is not None:
                namespace[attr] = bound

        namespace["_declared"] = declared
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        # Methods inherited from plain mixins need the same binding
        for attr in dir(cls):
            owner = next((k for k in cls.__mro__ if attr in k.__dict__), None)
            if owner is None or isinstance(owner, RepositoryMeta):
                continue
            if (bound := _bind_to_singleton(attr, owner.__dict__[attr])) is not None:
                type.__setattr__(cls, attr, bound)

        return cls

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        raise InstantiationNotAllowed(cls.__name__)

    def __getattr__(cls, name: str) -> Any:
        # Instance attributes are reachable from the class as well
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(cls.instance(), name)

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in CONFIG_FIELDS:
            getattr(cls.instance().config, f"set_{name}")(value)
        else:
            super().__setattr__(name, value)

    def _build_instance(cls) -> "Repository":
        return super().__call__()


class Repository(SerializeMixin, FindMixin, StoreMixin, ManagementMixin, metaclass=RepositoryMeta):
    """Base class for repository definitions."""

    def __init__(self) -> None:
        cls = type(self)
        object.__setattr__(self, "config", RepositoryConfig(cls.__name__, cls._declared))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.config!r}>"

    def __setattr__(self, name: str, value: Any) -> None:
        if name in CONFIG_FIELDS:
            getattr(self.config, f"set_{name}")(value)
        else:
            object.__setattr__(self, name, value)

    @classmethod
    def instance(cls) -> "Repository":
        """Get the singleton instance of this repository definition."""
        # Looked up in the class's own __dict__ so subclasses get their own
        instance = cls.__dict__.get("_singleton")
        if instance is None:
            with _instance_lock:
                instance = cls.__dict__.get("_singleton")
                if instance is None:
                    instance = cls._build_instance()
                    type.__setattr__(cls, "_singleton", instance)
        return instance

    # -------------------------------------------------------------------------
    # Configuration accessors
    # -------------------------------------------------------------------------

    def client(self, value: Any = UNSET) -> DocumentStoreClient:
        """Read the store client, or set it when given a non-empty value."""
        return self.config.client(value)

    def set_client(self, value: DocumentStoreClient | None) -> DocumentStoreClient:
        """Set the store client; ``None`` reverts to the default client."""
        return self.config.set_client(value)

    def collection_name(self, value: Any = UNSET) -> str:
        """Read the collection name, or set it when given a non-empty value."""
        return self.config.collection_name(value)

    def set_collection_name(self, value: str | None) -> str:
        """Set the collection name; empty reverts to the lower-cased class name."""
        return self.config.set_collection_name(value)

    def document_kind(self, value: Any = UNSET) -> str:
        """Read the document kind, or set it when given a non-empty value."""
        return self.config.document_kind(value)

    def set_document_kind(self, value: str | None) -> str:
        """Set the document kind; empty reverts to ``"_doc"``."""
        return self.config.set_document_kind(value)

    def object_class(self, value: Any = UNSET) -> Any:
        """Read the object class, or set it (``None`` clears it)."""
        return self.config.object_class(value)

    def set_object_class(self, value: Any) -> Any:
        """Set the object class; ``None`` clears it."""
        return self.config.set_object_class(value)
