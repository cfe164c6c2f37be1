"""
Data formatting utilities for AirtimeNigeria API operations.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..constants import DEFAULT_CURRENCY, NIGERIA_COUNTRY_CODE


def format_phone(phone: str) -> str:
    """
    Format phone number to the ten-digit local form.

    Strips whitespace and drops a leading +234, 234 or 0. Does not validate;
    call is_valid_phone first.

    Args:
        phone: Phone number to format

    Returns:
        Formatted phone number (e.g., 8012345678)
    """
    phone = re.sub(r'\s', '', phone)

    for prefix in ('+' + NIGERIA_COUNTRY_CODE, NIGERIA_COUNTRY_CODE, '0'):
        if phone.startswith(prefix):
            return phone[len(prefix):]
    return phone


def format_currency(amount: Union[int, float, Decimal, str, None], currency: str = DEFAULT_CURRENCY.value) -> str:
    """
    Format amount with currency code.

    Args:
        amount: Amount to format
        currency: Currency code

    Returns:
        Formatted string (e.g., "NGN 1,000.00")
    """
    try:
        amount = Decimal(str(amount))
        # Format with thousand separators
        formatted = f"{amount:,.2f}"
        return f"{currency} {formatted}"
    except (InvalidOperation, ValueError, TypeError):
        return f"{currency} 0.00"


def parse_amount(amount: Union[str, int, float, None]) -> Optional[Decimal]:
    """
    Parse a price or cost from an API response.

    Returns:
        Decimal amount, or None when the field is absent or not numeric
    """
    if amount is None or isinstance(amount, bool):
        return None
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return None
