"""
Errors raised while building a plan.

Both are ValueErrors so callers that already guard form input with
`except ValueError` keep working. `str(error)` is the user-facing message.
"""


class SleepPlanError(ValueError):
    """Base class for input problems the user can fix."""


class InvalidTimeFormat(SleepPlanError):
    """A clock time was not a valid 24-hour "HH:MM" string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM, 24-hour)")


class InvalidInput(SleepPlanError):
    """The times parse but describe something we can't plan around."""
