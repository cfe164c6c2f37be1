"""
Validation utilities for AirtimeNigeria API operations.
"""

import re
from enum import Enum
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple, Union

from ..constants import (
    NetworkOperator,
    PriceType,
    ProcessType,
    MIN_AIRTIME_AMOUNT,
    MAX_AIRTIME_AMOUNT,
    PHONE_NUMBER_PATTERN,
)
from ..exceptions import (
    ValidationError,
    InvalidNetworkOperatorError,
    InvalidAmountError,
    InvalidProcessTypeError,
    InvalidPriceTypeError,
)

_PHONE_RE = re.compile(PHONE_NUMBER_PATTERN, re.ASCII)


def is_valid_phone(phone: str) -> bool:
    """
    Check whether a phone number is a well-formed Nigerian mobile number.

    Accepts local (080...), international (234... / +234...) and bare
    ten-digit (80...) forms. Whitespace anywhere in the number is ignored.

    Args:
        phone: Phone number to check

    Returns:
        True if the number is well-formed
    """
    if not isinstance(phone, str):
        return False
    return bool(_PHONE_RE.match(re.sub(r'\s', '', phone)))


def validate_required(**fields: Any) -> None:
    """
    Ensure all given fields are set.

    Raises:
        ValidationError: Naming every field when any of them is missing
    """
    missing = [name for name, value in fields.items() if not value]
    if not missing:
        return

    names = list(fields)
    if len(names) == 1:
        raise ValidationError(f"{names[0]} is required")
    raise ValidationError(
        f"{', '.join(names[:-1])}, and {names[-1]} are required"
    )


def _choice(value: Union[str, Enum, None]) -> str:
    if isinstance(value, Enum):
        return value.value
    return str(value).strip().lower()


def validate_network_operator(operator: Union[str, NetworkOperator]) -> str:
    """
    Validate network operator.

    Args:
        operator: Operator name or NetworkOperator member

    Returns:
        Validated operator code (e.g. "mtn")

    Raises:
        InvalidNetworkOperatorError: If operator is not supported
    """
    valid_operators = [o.value for o in NetworkOperator]
    operator = _choice(operator) if operator else ''

    if operator not in valid_operators:
        raise InvalidNetworkOperatorError(
            "Invalid network operator. "
            f"Must be one of: {', '.join(valid_operators)}"
        )

    return operator


def validate_airtime_amount(
    amount: Any,
    min_amount: int = MIN_AIRTIME_AMOUNT,
    max_amount: int = MAX_AIRTIME_AMOUNT
) -> int:
    """
    Validate airtime amount.

    Args:
        amount: Amount in NGN, a whole number
        min_amount: Minimum allowed amount (default: 50 NGN)
        max_amount: Maximum allowed amount (default: 50000 NGN)

    Returns:
        Validated amount as int

    Raises:
        InvalidAmountError: If amount is not a whole number or out of range
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    if not value.is_finite() or value != value.to_integral_value():
        raise InvalidAmountError(f"Amount must be a whole number. Got: {amount}")

    if value < min_amount or value > max_amount:
        raise InvalidAmountError(
            f"Amount must be between {min_amount} and {max_amount} NGN"
        )

    return int(value)


def validate_plan_identifier(
    package_code: Optional[str],
    plan_id: Optional[int]
) -> Tuple[str, Union[str, int]]:
    """
    Pick the wire field identifying a data plan.

    The package code wins when both are given.

    Returns:
        (field name, value) for the request body

    Raises:
        ValidationError: If neither identifier is given
    """
    if package_code:
        return 'package_code', package_code
    if plan_id:
        return 'plan_id', plan_id
    raise ValidationError("Either package_code or plan_id is required")


def validate_process_type(process_type: Union[str, ProcessType]) -> str:
    """
    Validate data wallet vend process type.

    Raises:
        InvalidProcessTypeError: If process type is not queue or instant
    """
    process_type = _choice(process_type)

    if process_type not in [p.value for p in ProcessType]:
        raise InvalidProcessTypeError(
            'process_type must be either "queue" or "instant"'
        )

    return process_type


def validate_price_type(price_type: Union[str, PriceType]) -> PriceType:
    """
    Validate data plan price tier.

    Raises:
        InvalidPriceTypeError: If price type is not regular, agent or dealer
    """
    valid_types = [p.value for p in PriceType]
    price_type = _choice(price_type)

    if price_type not in valid_types:
        raise InvalidPriceTypeError(
            f"Invalid price type: {price_type}. "
            f"Must be one of: {', '.join(valid_types)}"
        )

    return PriceType(price_type)


def build_payload(required: Dict[str, Any], **optional: Any) -> Dict[str, Any]:
    """
    Build a request body from required fields plus the optional ones that are set.
    """
    payload = dict(required)
    payload.update({key: value for key, value in optional.items() if value})
    return payload
