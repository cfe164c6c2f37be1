"""
Service modules for AirtimeNigeria API operations.
"""

from .airtime_service import AirtimeService
from .data_service import DataService
from .account_service import AccountService

__all__ = [
    'AirtimeService',
    'DataService',
    'AccountService',
]
