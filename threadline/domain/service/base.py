"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the logic that spans more than one aggregate.
    """

    pass
