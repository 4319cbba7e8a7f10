"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""

    code = "DOMAIN_ERROR"


class InvalidTripInput(DomainError):
    """Raised when a trip request fails strict validation."""

    code = "INVALID_INPUT"


class InvalidCoordinate(InvalidTripInput):
    """Latitude or longitude outside the valid range."""

    code = "INVALID_COORDINATE"

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        super().__init__(f"{field} out of range: {value}")


class InvalidDuration(InvalidTripInput):
    """Trip duration below one day."""

    code = "INVALID_DURATION"

    def __init__(self, days: int):
        self.days = days
        super().__init__(f"days must be >= 1, got {days}")


class NonFiniteDistance(DomainError):
    """Distance computation produced NaN or Infinity."""

    code = "NON_FINITE_DISTANCE"
