"""Exceptions raised when a stay cannot be priced."""


class BookingPeriodError(ValueError):
    """Base class for invalid pricing inputs."""


class InvalidStayError(BookingPeriodError):
    """Raised when check-out does not fall strictly after check-in."""


class InvalidRateError(BookingPeriodError):
    """Raised when a monthly rate is negative, non-finite or not a number."""
