# core/errors.py


class FoodieTourError(Exception):
    """Base class for errors surfaced to callers of the planner."""


class ValidationError(FoodieTourError):
    """The caller supplied no usable city."""


class UpstreamError(FoodieTourError):
    """Something unexpected escaped while building the itinerary."""
