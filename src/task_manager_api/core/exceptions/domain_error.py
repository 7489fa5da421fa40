class DomainError(Exception):
    """
    Base class for all domain layer exceptions.
    Every subclass is an expected, client-facing condition, never a fatal one.
    """

    pass
