"""
Configuration management for the AirtimeNigeria client.
"""

from django.conf import settings

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError


class AirtimeNigeriaSettings:
    """
    Configuration manager for AirtimeNigeria API settings.
    Loads settings from Django settings on access, never at import time,
    so the client stays usable without a configured Django project.
    """

    @property
    def api_base_url(self):
        """Get AirtimeNigeria API base URL."""
        return getattr(settings, 'AIRTIMENIGERIA_BASE_URL', DEFAULT_BASE_URL) or DEFAULT_BASE_URL

    @property
    def api_token(self):
        """Get AirtimeNigeria API token."""
        api_token = getattr(settings, 'AIRTIMENIGERIA_API_TOKEN', '')
        if not api_token:
            raise ConfigurationError(
                "AIRTIMENIGERIA_API_TOKEN is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return api_token

    @property
    def timeout(self):
        """Get request timeout in seconds."""
        return getattr(settings, 'AIRTIMENIGERIA_TIMEOUT', DEFAULT_TIMEOUT)

    @property
    def callback_allowed_ips(self):
        """Get list of IPs allowed to post delivery reports."""
        return getattr(settings, 'AIRTIMENIGERIA_CALLBACK_ALLOWED_IPS', [])


config = AirtimeNigeriaSettings()
