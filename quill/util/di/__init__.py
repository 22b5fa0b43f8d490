"""Dependency injection wiring."""

from quill.util.di.application import ProdApplicationProvider
from quill.util.di.base import Component, ProviderBase
from quill.util.di.core import ProdConfigProvider
from quill.util.di.domain import ProdDomainProvider
from quill.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

# Order doesn't matter to dishka; mockable bases are resolved by get_provider
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Pick the provider class to instantiate for an entry of ``PROVIDERS``.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Select the mock subclass of a mockable component

    Returns:
        ``base`` itself if it has no subclasses, otherwise the subclass whose
        ``__is_mock__`` equals ``use_mock``

    Raises:
        ValueError: If a mockable component lacks the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    component = base.__mock_component__ or base.__name__
    raise ValueError(
        f"No {'mock' if use_mock else 'production'} provider for {component}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
