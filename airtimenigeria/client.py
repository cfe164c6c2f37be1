"""
Main AirtimeNigeria API client.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    NetworkOperator,
    PriceType,
    ProcessType,
)
from .exceptions import ConfigurationError
from .models import (
    DataPlan,
    DataPlansResponse,
    PurchaseResponse,
    WalletBalanceResponse,
)
from .services import AccountService, AirtimeService, DataService
from .utils.formatters import format_phone
from .utils.http_client import APIResponse, HTTPClient
from .utils.validators import is_valid_phone


class AirtimeNigeriaClient:
    """
    Client for the AirtimeNigeria airtime and data API.

    Token, base URL and timeout are fixed at construction. The client keeps
    no per-call state, so one instance can be shared between threads.

    Example:
        >>> client = AirtimeNigeriaClient("your-api-token")
        >>> plans = client.get_data_plans_by_operator("mtn")
        >>> client.purchase_data(phone="08012345678", package_code=plans[0].package_code)
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize AirtimeNigeria client.

        Args:
            api_token: API bearer token
            base_url: API root (default: https://www.airtimenigeria.com/api/v1)
            timeout: Request timeout in seconds (default: 30)

        Raises:
            ConfigurationError: If the token is empty or the timeout is not positive
        """
        if not api_token:
            raise ConfigurationError("API token is required")
        if timeout is None or timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds. Got: {timeout}")

        self.http_client = HTTPClient(base_url or DEFAULT_BASE_URL, api_token, timeout)
        self.airtime_service = AirtimeService(self.http_client)
        self.data_service = DataService(self.http_client)
        self.account_service = AccountService(self.http_client)

    @classmethod
    def from_settings(cls) -> 'AirtimeNigeriaClient':
        """
        Build a client from the AIRTIMENIGERIA_* Django settings.

        Raises:
            ConfigurationError: If AIRTIMENIGERIA_API_TOKEN is not set
        """
        from .config import config

        return cls(
            api_token=config.api_token,
            base_url=config.api_base_url,
            timeout=config.timeout
        )

    @property
    def base_url(self) -> str:
        return self.http_client.base_url

    @property
    def timeout(self) -> float:
        return self.http_client.timeout

    def request(
        self,
        endpoint: str,
        method: str = 'GET',
        data: Optional[Dict[str, Any]] = None
    ) -> APIResponse:
        """Send a raw request to any API endpoint."""
        return self.http_client.request(endpoint, method, data)

    # Purchases

    def purchase_airtime(
        self,
        network_operator: Union[str, NetworkOperator],
        phone: str,
        amount: int,
        max_amount: Union[str, int],
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """Purchase airtime. See AirtimeService.purchase_airtime."""
        return self.airtime_service.purchase_airtime(
            network_operator=network_operator,
            phone=phone,
            amount=amount,
            max_amount=max_amount,
            callback_url=callback_url,
            customer_reference=customer_reference
        )

    def purchase_data(
        self,
        phone: str,
        package_code: Optional[str] = None,
        plan_id: Optional[int] = None,
        max_amount: Optional[Union[str, int]] = None,
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """Purchase a data bundle. See DataService.purchase_data."""
        return self.data_service.purchase_data(
            phone=phone,
            package_code=package_code,
            plan_id=plan_id,
            max_amount=max_amount,
            callback_url=callback_url,
            customer_reference=customer_reference
        )

    def vend_data_from_wallet(
        self,
        phone: str,
        package_code: Optional[str] = None,
        plan_id: Optional[int] = None,
        process_type: Optional[Union[str, ProcessType]] = None,
        callback_url: Optional[str] = None,
        customer_reference: Optional[str] = None
    ) -> PurchaseResponse:
        """Vend data from the data wallet. See DataService.vend_data_from_wallet."""
        return self.data_service.vend_data_from_wallet(
            phone=phone,
            package_code=package_code,
            plan_id=plan_id,
            process_type=process_type,
            callback_url=callback_url,
            customer_reference=customer_reference
        )

    # Catalog

    def get_data_plans(self) -> DataPlansResponse:
        return self.data_service.get_data_plans()

    def get_data_plans_by_operator(
        self,
        network_operator: Union[str, NetworkOperator]
    ) -> List[DataPlan]:
        return self.data_service.get_data_plans_by_operator(network_operator)

    def find_data_plan(self, package_code: str) -> Optional[DataPlan]:
        return self.data_service.find_data_plan(package_code)

    def get_data_plan_price(
        self,
        package_code: str,
        price_type: Optional[Union[str, PriceType]] = PriceType.REGULAR
    ) -> Optional[Decimal]:
        return self.data_service.get_data_plan_price(package_code, price_type)

    # Account

    def get_wallet_balance(self) -> WalletBalanceResponse:
        return self.account_service.get_wallet_balance()

    # Phone utilities

    is_valid_phone = staticmethod(is_valid_phone)
    format_phone = staticmethod(format_phone)
