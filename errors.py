"""Validation errors raised before any balancing runs."""


class InvalidInput(ValueError):
    """Input rejected by the validator; the computation does not proceed."""


class ShapeError(InvalidInput):
    """A parameter is not a list or tuple."""


class RangeError(InvalidInput):
    """An id, score or collection size falls outside its bounds."""


class AwayCountError(InvalidInput):
    """More agents are away than half the pool allows."""
