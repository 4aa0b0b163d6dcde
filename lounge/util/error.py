"""Errors raised while wiring the service together, before any request runs."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting is missing, inconsistent, or unsafe for the environment.

    Attributes:
        setting: Dotted settings path at fault (e.g. ``auth.jwt_secret``)
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component.

    Attributes:
        component: Component name that could not be resolved
    """

    def __init__(self, message: str, component: str | None = None) -> None:
        self.component = component
        super().__init__(message)
