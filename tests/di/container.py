"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from tube.persistence.repository.inmemory import InMemoryStore
from tube.util.di import PROVIDERS, Component, get_provider

from .persistence import MockPersistenceProvider


def build_test_container(
    unmock: set[Component] | None = None,
    store: InMemoryStore | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        store: In-memory store backing mocked persistence. A fresh one is
               created when omitted. Pass one in to seed videos and
               profiles from a synchronous test.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components or dependency violations

    Examples:
        container = build_test_container()

        # PostgreSQL repositories instead of the in-memory store
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        # Determine if mockable
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            # Mockable component - check unmock list
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        if provider_class is MockPersistenceProvider:
            provider_instances.append(MockPersistenceProvider(store=store))
        else:
            provider_instances.append(provider_class())

    # FastapiProvider lets the same container back a test app
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
