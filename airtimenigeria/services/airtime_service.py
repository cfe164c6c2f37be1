"""
Airtime service for AirtimeNigeria airtime top-ups.
"""

import logging
from typing import Optional, Union

from ..constants import APIEndpoints, NetworkOperator
from ..exceptions import APIError, ValidationError
from ..models import PurchaseResponse
from ..utils.http_client import HTTPClient
from ..utils.validators import (
    build_payload,
    validate_airtime_amount,
    validate_network_operator,
    validate_required,
)

logger = logging.getLogger(__name__)


class AirtimeService:
    """
    Service for airtime purchases.
    """

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    def purchase_airtime(
        self,
        network_operator: Union[str, NetworkOperator],
        phone: str,
        amount: int,
        max_amount: Union[str, int],
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """
        Purchase airtime for one or more phone numbers.

        Args:
            network_operator: 'mtn', 'airtel', 'glo' or '9mobile'
            phone: Single phone number or comma-separated list
            amount: Airtime amount per recipient (50-50000 NGN)
            max_amount: Maximum amount willing to pay, sent as a string
            callback_url: URL that receives delivery reports (optional)
            customer_reference: Unique internal identifier (optional)

        Returns:
            PurchaseResponse with order details. A remote failure comes
            back with success=False rather than as an exception.

        Raises:
            ValidationError: If input validation fails
            APIError: If the request cannot be completed
        """
        logger.info(f"Purchasing {network_operator} airtime for: {phone}")

        # Validate inputs
        try:
            validate_required(
                network_operator=network_operator,
                phone=phone,
                amount=amount,
                max_amount=max_amount
            )
            validated_operator = validate_network_operator(network_operator)
            validated_amount = validate_airtime_amount(amount)
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        # Prepare payload
        payload = build_payload(
            {
                'network_operator': validated_operator,
                'phone': phone,
                'amount': validated_amount,
                'max_amount': str(max_amount),
            },
            callback_url=callback_url,
            customer_reference=customer_reference
        )

        try:
            response = self.http_client.post(APIEndpoints.AIRTIME, payload)
        except APIError as e:
            logger.error(f"Airtime purchase failed: {str(e)}")
            raise

        result = PurchaseResponse.from_dict(response.data)
        logger.info(
            f"Airtime purchase completed. "
            f"Success: {result.success}, Status: {result.status}"
        )
        return result
