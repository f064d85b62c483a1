"""
modules/errors.py
-----------------
Exception kinds raised across the packing planner.

    ValidationError    incomplete / inconsistent trip fields at a forward
                       wizard transition; shown to the user, never advances.
    InvalidInputError  contract violation in the forecast synthesizer or the
                       packing recommender (e.g. empty forecast, duration <= 0).
    SearchFailure      network / payload failure inside the geocoding tool;
                       caught at the tool boundary and replaced by [].
"""


class PackingPlannerError(Exception):
    """Base class for all packing planner errors."""


class ValidationError(PackingPlannerError, ValueError):
    pass


class InvalidInputError(PackingPlannerError, ValueError):
    pass


class SearchFailure(PackingPlannerError, RuntimeError):
    pass
