"""Domain errors raised by the services and mapped to HTTP responses in app.main."""


class TrackerError(Exception):
    """Base for every recoverable engine failure."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Bad weight/reps, missing required fields, duplicate exercise name."""

    status_code = 422


class ConstraintError(TrackerError):
    """Operation would break a store invariant (exercise with history, second active session)."""

    status_code = 409


class EmptyWorkoutError(TrackerError):
    """The active program has no workout defined for its current slot."""

    status_code = 409


class FormatError(TrackerError):
    """Import document is missing version/data or holds malformed collections."""

    status_code = 400


class NotFoundError(TrackerError):
    status_code = 404
