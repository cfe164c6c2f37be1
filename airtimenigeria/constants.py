"""
Constants and enums for AirtimeNigeria API operations.
"""

from enum import Enum


class NetworkOperator(str, Enum):
    """Mobile network operators in Nigeria."""
    MTN = "mtn"
    AIRTEL = "airtel"
    GLO = "glo"
    NINE_MOBILE = "9mobile"


class ProcessType(str, Enum):
    """How a data wallet vend is processed by the API."""
    QUEUE = "queue"
    INSTANT = "instant"


class PriceType(str, Enum):
    """Data plan price tiers."""
    REGULAR = "regular"
    AGENT = "agent"
    DEALER = "dealer"


# Price tier -> DataPlan attribute
PRICE_FIELDS = {
    PriceType.REGULAR: "regular_price",
    PriceType.AGENT: "agent_price",
    PriceType.DEALER: "dealer_price",
}


class Currency(str, Enum):
    """Supported currencies."""
    NGN = "NGN"


# API Endpoints
class APIEndpoints:
    """AirtimeNigeria API endpoints."""
    AIRTIME = "/airtime"

    # Data endpoints
    DATA = "/data"
    DATA_WALLET = "/data/wallet"
    DATA_PLANS = "/data/plans"

    # Account endpoints
    BALANCE = "/balance"


# Airtime amount limits (NGN, inclusive)
MIN_AIRTIME_AMOUNT = 50
MAX_AIRTIME_AMOUNT = 50000

# Phone number settings
NIGERIA_COUNTRY_CODE = "234"
PHONE_NUMBER_PATTERN = r'^(\+234|234|0)?[789][01]\d{8}$'

# Default settings
DEFAULT_BASE_URL = "https://www.airtimenigeria.com/api/v1"
DEFAULT_CURRENCY = Currency.NGN
DEFAULT_TIMEOUT = 30  # seconds
