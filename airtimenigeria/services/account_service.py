"""
Account service for AirtimeNigeria wallet operations.
"""

import logging

from ..constants import APIEndpoints
from ..exceptions import APIError
from ..models import WalletBalanceResponse
from ..utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class AccountService:
    """
    Service for account-related operations.
    """

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    def get_wallet_balance(self) -> WalletBalanceResponse:
        """
        Retrieve balances of all account wallets.

        Returns:
            WalletBalanceResponse with the universal, SMS and
            operator data wallets

        Raises:
            APIError: If balance retrieval fails
        """
        logger.info("Retrieving wallet balance")

        try:
            response = self.http_client.get(APIEndpoints.BALANCE)
        except APIError as e:
            logger.error(f"Failed to retrieve wallet balance: {str(e)}")
            raise

        result = WalletBalanceResponse.from_dict(response.data)
        if result.universal_wallet:
            logger.info(
                f"Wallet balance retrieved: "
                f"{result.universal_wallet.currency} {result.universal_wallet.balance}"
            )
        return result
