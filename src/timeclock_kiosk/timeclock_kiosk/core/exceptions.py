class KioskError(Exception):
    """Base exception for kiosk business rule violations."""


class ValidationError(KioskError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownEmployee(KioskError):
    """Raised when an employee id is not present in the roster."""


class RosterLoadFailure(KioskError):
    """Raised when the roster cannot be fetched or parsed."""


class WrongPin(KioskError):
    """Raised when no employee matches the entered PIN."""


class ActionRejectedLocally(KioskError):
    """Raised when an action is attempted outside its precondition."""


class RemoteActionFailure(KioskError):
    """Raised when the directory reports failure for an attendance action."""
