"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the guestbook rules that sit between the HTTP
    handlers and the store.
    """

    pass
