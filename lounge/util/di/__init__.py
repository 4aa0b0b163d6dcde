"""Dependency injection module."""

from typing import Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from lounge.util.di.application import ProdApplicationProvider
from lounge.util.di.base import Component, ProviderBase, known_components
from lounge.util.di.core import ProdConfigProvider
from lounge.util.di.domain import ProdDomainProvider
from lounge.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from lounge.util.error import DependencyInjectionError

# Concrete providers first, then mockable infrastructure components
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of PROVIDERS.

    Concrete providers are returned unchanged. For a mockable component the
    subclass whose ``__is_mock__`` equals ``use_mock`` is chosen; the
    in-memory variants only exist once the test package has been imported.

    Args:
        base: Entry of PROVIDERS
        use_mock: Whether the in-memory variant is wanted

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no variant of the requested kind is loaded
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    component = base.__mock_component__ or base.__name__
    kind = "in-memory" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} provider loaded for component {component!r}",
        component=component,
    )


def create_container() -> AsyncContainer:
    """Build the production container.

    Every component gets its production implementation; settings come from
    the environment when first requested.

    Returns:
        Container ready to hand to ``create_app``
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "create_container",
    "get_provider",
    "known_components",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
