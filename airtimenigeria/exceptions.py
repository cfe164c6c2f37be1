"""
Custom exceptions for AirtimeNigeria API operations.
"""


class AirtimeNigeriaException(Exception):
    """Base exception for all AirtimeNigeria-related errors."""

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class ConfigurationError(AirtimeNigeriaException):
    """Raised when the client is missing a token or has a bad setting."""
    pass


class ValidationError(AirtimeNigeriaException):
    """Raised when input validation fails."""
    pass


class InvalidNetworkOperatorError(ValidationError):
    """Raised when the network operator is not supported."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when amount is invalid."""
    pass


class InvalidProcessTypeError(ValidationError):
    """Raised when a wallet vend process type is not supported."""
    pass


class InvalidPriceTypeError(ValidationError):
    """Raised when a data plan price tier is not supported."""
    pass


class APIError(AirtimeNigeriaException):
    """Raised when a request to the AirtimeNigeria API cannot be completed."""
    pass


class NetworkError(APIError):
    """Raised on connection-level failures (refused, DNS, reset)."""
    pass


class RequestTimeoutError(APIError):
    """Raised when the API does not answer within the configured timeout."""
    pass


class ResponseParseError(APIError):
    """Raised when the response body is not valid JSON."""
    pass
