"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the authorization flow's rules; persistence and provider
    I/O are reached through injected interfaces.
    """

    pass
