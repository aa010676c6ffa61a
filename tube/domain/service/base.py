"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the comment engine's rules: thread structure, ownership,
    cascading deletion and read composition. They receive repositories and
    other services through their constructors and are request-scoped.
    """

    pass
