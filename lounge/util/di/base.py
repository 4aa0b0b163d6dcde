"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Components whose providers have an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all Lounge providers.

    A provider class that has subclasses is a mockable component: it names
    the component in ``__mock_component__`` and each subclass declares with
    ``__is_mock__`` whether it is the production or the in-memory variant.
    Concrete providers (config, domain, application) leave both unset.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def known_components() -> frozenset[str]:
    """Names accepted wherever a Component is expected."""
    return frozenset(get_args(Component))
