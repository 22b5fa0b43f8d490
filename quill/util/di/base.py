"""Provider base class shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for an in-memory double
Component = Literal["persistence"]


class ProviderBase(Provider):
    """A dishka provider tagged with its mockability.

    A mockable component is declared as a base class setting
    ``__mock_component__`` with one production subclass and one mock
    subclass (``__is_mock__ = True``). Providers without subclasses are
    used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
