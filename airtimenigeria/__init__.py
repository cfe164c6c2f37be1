"""
AirtimeNigeria client for Python and Django

A client for the AirtimeNigeria.com API: airtime and data bundle purchases,
data wallet vending, the data plan catalog and wallet balances.
"""

__version__ = "0.1.0"

from .client import AirtimeNigeriaClient
from .constants import NetworkOperator, PriceType, ProcessType
from .exceptions import (
    AirtimeNigeriaException,
    ConfigurationError,
    ValidationError,
    APIError,
    NetworkError,
    RequestTimeoutError,
    ResponseParseError,
)
from .utils.formatters import format_phone
from .utils.validators import is_valid_phone

__all__ = [
    'AirtimeNigeriaClient',
    'NetworkOperator',
    'PriceType',
    'ProcessType',
    'AirtimeNigeriaException',
    'ConfigurationError',
    'ValidationError',
    'APIError',
    'NetworkError',
    'RequestTimeoutError',
    'ResponseParseError',
    'format_phone',
    'is_valid_phone',
]
