"""Domain errors raised by the service layer."""


class WellnessError(Exception):
    """Base class for errors the API reports to the caller."""


class ValidationError(WellnessError):
    """A required field is missing or has the wrong shape."""


class InvalidTransitionError(WellnessError):
    """An appointment status change the workflow does not allow."""

    def __init__(self, current_status: str, requested_status: str):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(f'Cannot change appointment status from {current_status} to {requested_status}.')
