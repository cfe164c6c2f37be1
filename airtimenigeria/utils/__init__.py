"""
Utility modules for AirtimeNigeria API operations.
"""

from .http_client import APIResponse, HTTPClient
from .validators import (
    is_valid_phone,
    validate_required,
    validate_network_operator,
    validate_airtime_amount,
    validate_plan_identifier,
    validate_process_type,
    validate_price_type,
)
from .formatters import (
    format_phone,
    format_currency,
    parse_amount,
)

__all__ = [
    'APIResponse',
    'HTTPClient',
    'is_valid_phone',
    'validate_required',
    'validate_network_operator',
    'validate_airtime_amount',
    'validate_plan_identifier',
    'validate_process_type',
    'validate_price_type',
    'format_phone',
    'format_currency',
    'parse_amount',
]
