"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class FetchFailure(ServiceError):
    """The remote search could not produce a usable result set."""
