"""Errors raised while resolving or installing a template package."""


class HygenAddError(Exception):
    """Base class for errors that end a hygen-add run."""


class ResolutionError(HygenAddError):
    def __init__(self, identifier, searched=()):
        self.identifier = identifier
        self.searched = tuple(searched)
        super().__init__(f"{identifier} not found")


class CopyError(HygenAddError):
    """A filesystem operation failed while installing generators.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, message, *, path=None, package=None):
        self.path = path
        self.package = package
        super().__init__(message)
