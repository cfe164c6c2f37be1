"""
Data service for AirtimeNigeria data bundles.
Handles bundle purchases, data wallet vending and the plan catalog.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from ..constants import (
    APIEndpoints,
    NetworkOperator,
    PriceType,
    ProcessType,
    PRICE_FIELDS,
)
from ..exceptions import APIError, ValidationError
from ..models import DataPlan, DataPlansResponse, PurchaseResponse
from ..utils.http_client import HTTPClient
from ..utils.validators import (
    build_payload,
    validate_network_operator,
    validate_plan_identifier,
    validate_price_type,
    validate_process_type,
    validate_required,
)

logger = logging.getLogger(__name__)


class DataService:
    """
    Service for data bundle operations.
    """

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    def _post_purchase(self, endpoint: str, payload: Dict[str, Any]) -> PurchaseResponse:
        try:
            response = self.http_client.post(endpoint, payload)
        except APIError as e:
            logger.error(f"Data purchase failed: {str(e)}")
            raise

        result = PurchaseResponse.from_dict(response.data)
        logger.info(
            f"Data purchase completed. "
            f"Success: {result.success}, Status: {result.status}"
        )
        return result

    def purchase_data(
        self,
        phone: str,
        package_code: Optional[str] = None,
        plan_id: Optional[int] = None,
        max_amount: Optional[Union[str, int]] = None,
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """
        Purchase a data bundle with the Naira balance.

        Args:
            phone: Single phone number or comma-separated list
            package_code: Package code of the data plan
            plan_id: Plan ID, used only when package_code is not given
            max_amount: Maximum amount willing to pay (optional)
            callback_url: URL that receives delivery reports (optional)
            customer_reference: Unique internal identifier (optional)

        Returns:
            PurchaseResponse with order details

        Raises:
            ValidationError: If input validation fails
            APIError: If the request cannot be completed
        """
        logger.info(f"Purchasing data bundle for: {phone}")

        try:
            validate_required(phone=phone)
            plan_field, plan_value = validate_plan_identifier(package_code, plan_id)
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        payload = build_payload(
            {'phone': phone, plan_field: plan_value},
            max_amount=str(max_amount) if max_amount else None,
            callback_url=callback_url,
            customer_reference=customer_reference
        )
        return self._post_purchase(APIEndpoints.DATA, payload)

    def vend_data_from_wallet(
        self,
        phone: str,
        package_code: Optional[str] = None,
        plan_id: Optional[int] = None,
        process_type: Optional[Union[str, ProcessType]] = None,
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """
        Vend a data bundle from the data wallet balance.

        Args:
            phone: Single phone number or comma-separated list
            package_code: Package code of the data plan
            plan_id: Plan ID, used only when package_code is not given
            process_type: 'queue' or 'instant' (optional)
            callback_url: URL that receives delivery reports (optional)
            customer_reference: Unique internal identifier (optional)

        Returns:
            PurchaseResponse with order details

        Raises:
            ValidationError: If input validation fails
            APIError: If the request cannot be completed
        """
        logger.info(f"Vending data from wallet for: {phone}")

        try:
            validate_required(phone=phone)
            plan_field, plan_value = validate_plan_identifier(package_code, plan_id)
            validated_process_type = (
                validate_process_type(process_type) if process_type else None
            )
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        payload = build_payload(
            {'phone': phone, plan_field: plan_value},
            process_type=validated_process_type,
            callback_url=callback_url,
            customer_reference=customer_reference
        )
        return self._post_purchase(APIEndpoints.DATA_WALLET, payload)

    def get_data_plans(self) -> DataPlansResponse:
        """
        Fetch the full data plan catalog.

        Returns:
            DataPlansResponse; every call fetches a fresh snapshot
        """
        logger.info("Retrieving data plans")

        try:
            response = self.http_client.get(APIEndpoints.DATA_PLANS)
        except APIError as e:
            logger.error(f"Failed to retrieve data plans: {str(e)}")
            raise

        result = DataPlansResponse.from_dict(response.data)
        logger.info(f"Retrieved {len(result.data)} data plans")
        return result

    def get_data_plans_by_operator(
        self,
        network_operator: Union[str, NetworkOperator]
    ) -> List[DataPlan]:
        """
        Get data plans for one network operator.

        Returns:
            Matching plans; empty when the catalog request reports failure
        """
        try:
            operator = validate_network_operator(network_operator)
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        response = self.get_data_plans()
        if not response.success or not response.data:
            return []

        return [plan for plan in response.data if plan.network_operator == operator]

    def find_data_plan(self, package_code: str) -> Optional[DataPlan]:
        """
        Find a data plan by package code.

        Returns:
            The first plan with exactly this package code, or None
        """
        validate_required(package_code=package_code)

        response = self.get_data_plans()
        if not response.success:
            return None

        for plan in response.data:
            if plan.package_code == package_code:
                return plan
        return None

    def get_data_plan_price(
        self,
        package_code: str,
        price_type: Optional[Union[str, PriceType]] = PriceType.REGULAR
    ) -> Optional[Decimal]:
        """
        Get the price of a data plan for a customer tier.

        Args:
            package_code: Package code of the data plan
            price_type: 'regular' (default), 'agent' or 'dealer'

        Returns:
            Price for the tier, Decimal('0') for a free plan, or None
            when the plan is not in the catalog or has no such price
        """
        try:
            validated_type = validate_price_type(price_type or PriceType.REGULAR)
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        plan = self.find_data_plan(package_code)
        if plan is None:
            logger.info(f"Data plan not found: {package_code}")
            return None

        return getattr(plan, PRICE_FIELDS[validated_type])
