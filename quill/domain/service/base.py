"""Domain service marker."""


class Service:
    """Business logic over one or more repositories.

    Instances live for one request and are built by the DI container.
    """
