"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ConfigurationError(DomainException):
    """Service configuration is missing or out of range"""

    pass


class ExtractionError(DomainException):
    """Balance or date text from the portal does not match the expected format"""

    pass


class InvalidMealPriceError(DomainException):
    """Meal price is zero or negative"""

    pass


class PortalError(DomainException):
    """Account portal is unreachable or the login flow did not complete"""

    pass


class PaydayResolutionError(DomainException):
    """No business day found within the backward search window"""

    pass
