"""
GraphQL Errors

Exceptions raised by resolvers. Strawberry reports them to the client as
entries in the response's ``errors`` list, using the exception message.
"""


class ValidationError(Exception):
    """Raised when an argument is outside its allowed values."""

    pass


class NotFoundError(Exception):
    """Raised when an operation references a resource that does not exist."""

    pass
