"""
Typed structures for AirtimeNigeria API requests and responses.

Nothing here is persisted; every object lives for a single call.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .exceptions import ResponseParseError
from .utils.formatters import parse_amount


def _as_dict(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ResponseParseError(
            f"Unexpected response payload: expected a JSON object, got {type(payload).__name__}",
            response_data=payload
        )
    return payload


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


@dataclass
class DataPlan:
    """A data bundle offer from the plan catalog."""
    network_operator: str
    plan_summary: str
    package_code: str
    plan_id: Optional[int]
    validity: str
    regular_price: Optional[Decimal]
    agent_price: Optional[Decimal]
    dealer_price: Optional[Decimal]
    currency: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DataPlan':
        return cls(
            network_operator=data.get('network_operator', ''),
            plan_summary=data.get('plan_summary', ''),
            package_code=data.get('package_code', ''),
            plan_id=data.get('plan_id'),
            validity=data.get('validity', ''),
            regular_price=parse_amount(data.get('regular_price')),
            agent_price=parse_amount(data.get('agent_price')),
            dealer_price=parse_amount(data.get('dealer_price')),
            currency=data.get('currency', ''),
        )


@dataclass
class PurchaseDetails:
    """Order details returned by airtime and data purchases."""
    reference: Optional[str] = None
    customer_reference: Optional[str] = None
    package: Optional[str] = None
    recipients: Optional[str] = None
    number_of_recipients: Optional[int] = None
    airtime_amount: Optional[Decimal] = None
    unit_cost: Optional[Decimal] = None
    total_cost: Optional[Decimal] = None
    currency: Optional[str] = None
    gateway_response: Optional[str] = None
    delivery_status: Optional[str] = None
    order_status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PurchaseDetails':
        return cls(
            reference=data.get('reference'),
            customer_reference=data.get('customer_reference'),
            package=data.get('package'),
            recipients=data.get('recipients'),
            number_of_recipients=data.get('number_of_recipients'),
            airtime_amount=parse_amount(data.get('airtime_amount')),
            unit_cost=parse_amount(data.get('unit_cost')),
            total_cost=parse_amount(data.get('total_cost')),
            currency=data.get('currency'),
            gateway_response=data.get('gateway_response'),
            delivery_status=data.get('delivery_status'),
            order_status=data.get('order_status'),
        )


@dataclass
class PurchaseResponse:
    """
    Envelope for POST /airtime, /data and /data/wallet.

    A remote failure (insufficient balance, unknown plan) arrives with
    success=False and is returned as-is.
    """
    success: bool
    status: Optional[str]
    message: Optional[str]
    details: Optional[PurchaseDetails]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Any) -> 'PurchaseResponse':
        data = _as_dict(payload)
        details = data.get('details')
        return cls(
            success=bool(data.get('success')),
            status=data.get('status'),
            message=data.get('message'),
            details=PurchaseDetails.from_dict(details) if isinstance(details, dict) else None,
            raw=data,
        )


@dataclass
class DataPlansResponse:
    """Envelope for GET /data/plans. A fresh catalog snapshot on every call."""
    success: bool
    status: Optional[str]
    message: Optional[str]
    data: List[DataPlan]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Any) -> 'DataPlansResponse':
        data = _as_dict(payload)
        plans = _as_list(data.get('data'))
        return cls(
            success=bool(data.get('success')),
            status=data.get('status'),
            message=data.get('message'),
            data=[DataPlan.from_dict(plan) for plan in plans if isinstance(plan, dict)],
            raw=data,
        )


@dataclass
class WalletBalance:
    """Balance of a single wallet."""
    balance: Optional[Decimal]
    currency: Optional[str]

    @classmethod
    def from_dict(cls, data: Any) -> Optional['WalletBalance']:
        if not isinstance(data, dict):
            return None
        return cls(
            balance=parse_amount(data.get('balance')),
            currency=data.get('currency'),
        )


@dataclass
class WalletBalanceResponse:
    """Envelope for GET /balance."""
    success: bool
    status: Optional[str]
    message: Optional[str]
    universal_wallet: Optional[WalletBalance] = None
    sms_wallet: Optional[WalletBalance] = None
    mtn_data_wallet: Optional[WalletBalance] = None
    airtel_eds_wallet: Optional[WalletBalance] = None
    glo_cg_wallet: Optional[WalletBalance] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Any) -> 'WalletBalanceResponse':
        data = _as_dict(payload)
        return cls(
            success=bool(data.get('success')),
            status=data.get('status'),
            message=data.get('message'),
            universal_wallet=WalletBalance.from_dict(data.get('universal_wallet')),
            sms_wallet=WalletBalance.from_dict(data.get('sms_wallet')),
            mtn_data_wallet=WalletBalance.from_dict(data.get('mtn_data_wallet')),
            airtel_eds_wallet=WalletBalance.from_dict(data.get('airtel_eds_wallet')),
            glo_cg_wallet=WalletBalance.from_dict(data.get('glo_cg_wallet')),
            raw=data,
        )


@dataclass
class CallbackRecipient:
    """Per-recipient delivery status inside a callback."""
    recipient: Optional[str]
    gateway_response: Optional[str]
    status: Optional[str]
    delivery_status: Optional[str]


@dataclass
class CallbackPayload:
    """Delivery report POSTed by the API to a purchase's callback_url."""
    reference: str
    customer_reference: Optional[str]
    recipient: Optional[str]
    gateway_response: Optional[str]
    delivery_status: Optional[str]
    data: List[CallbackRecipient] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CallbackPayload':
        return cls(
            reference=data.get('reference', ''),
            customer_reference=data.get('customer_reference'),
            recipient=data.get('recipient'),
            gateway_response=data.get('gateway_response'),
            delivery_status=data.get('delivery_status'),
            data=[
                CallbackRecipient(
                    recipient=item.get('recipient'),
                    gateway_response=item.get('gateway_response'),
                    status=item.get('status'),
                    delivery_status=item.get('delivery_status'),
                )
                for item in _as_list(data.get('data'))
                if isinstance(item, dict)
            ],
        )
