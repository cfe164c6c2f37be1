from unittest import mock

import django
import pytest
import requests
from django.conf import settings

from tests.helpers import PLANS, make_response


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=False,
            SECRET_KEY='airtimenigeria-tests',
            ALLOWED_HOSTS=['testserver'],
            ROOT_URLCONF='airtimenigeria.urls',
            INSTALLED_APPS=[
                'airtimenigeria',
            ],
            DATABASES={},
            AIRTIMENIGERIA_API_TOKEN='test-token',
            AIRTIMENIGERIA_BASE_URL='https://api.example.test/api/v1',
            AIRTIMENIGERIA_TIMEOUT=5,
            AIRTIMENIGERIA_CALLBACK_ALLOWED_IPS=[],
        )
    django.setup()


@pytest.fixture
def plans_body():
    return {'success': True, 'status': 'success', 'data': [dict(p) for p in PLANS]}


@pytest.fixture
def mock_session(monkeypatch):
    """Patch requests.Session.request and hand back the mock."""
    request = mock.Mock(return_value=make_response({'success': True}))
    monkeypatch.setattr(requests.Session, 'request', request)
    return request


@pytest.fixture
def client():
    from airtimenigeria import AirtimeNigeriaClient

    return AirtimeNigeriaClient('test-token', base_url='https://api.example.test/api/v1')
