class ScheduleContractError(TypeError):
    """Raised when the engine is called with arguments no caller should pass (e.g. a missing resource)."""
    pass


class ReservationValidationError(ValueError):
    """Raised when reservation input is malformed (bad date/time, end before start, unknown status)."""
    pass


class ResourceValidationError(ValueError):
    """Raised when resource input is malformed (non-positive duration, inverted window)."""
    pass


class ResourceNotFoundError(LookupError):
    pass


class ReservationNotFoundError(LookupError):
    pass


class SlotUnavailableError(RuntimeError):
    """Raised when a requester tries to book a slot that is not available to them."""
    pass
