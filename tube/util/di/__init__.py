"""Dependency injection module.

Providers are listed once in PROVIDERS. Concrete providers are used as
they are; a provider with subclasses is a mockable component, and the
subclass whose ``__is_mock__`` flag matches the request is chosen.
"""

from typing import Type

from tube.util.di.application import ProdApplicationProvider
from tube.util.di.base import Component, ProviderBase
from tube.util.di.core import ProdConfigProvider
from tube.util.di.domain import ProdDomainProvider
from tube.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from tube.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
