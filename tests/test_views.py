import json

import pytest
from django.test import RequestFactory, override_settings
from django.urls import reverse

from airtimenigeria.models import CallbackPayload
from airtimenigeria.signals import delivery_report_received
from airtimenigeria.views import delivery_callback

REPORT = {
    'reference': 'AN-123',
    'customer_reference': 'ref-123',
    'recipient': '08012345678',
    'gateway_response': 'Successful',
    'delivery_status': 'delivered',
    'data': [
        {
            'recipient': '08012345678',
            'gateway_response': 'Successful',
            'status': 'success',
            'delivery_status': 'delivered',
        },
    ],
}


@pytest.fixture
def rf():
    return RequestFactory()


@pytest.fixture
def received():
    reports = []

    def receiver(sender, payload, **kwargs):
        reports.append(payload)

    delivery_report_received.connect(receiver)
    yield reports
    delivery_report_received.disconnect(receiver)


def post(rf, body, **extra):
    if not isinstance(body, str):
        body = json.dumps(body)
    request = rf.post(
        reverse('delivery_callback'), data=body, content_type='application/json', **extra
    )
    return delivery_callback(request)


def test_url_name():
    assert reverse('delivery_callback') == '/callback/delivery/'


def test_delivery_report_sends_signal(rf, received):
    response = post(rf, REPORT)

    assert response.status_code == 200
    assert json.loads(response.content) == {'status': 'received'}
    assert len(received) == 1
    payload = received[0]
    assert isinstance(payload, CallbackPayload)
    assert payload.reference == 'AN-123'
    assert payload.customer_reference == 'ref-123'
    assert payload.data[0].delivery_status == 'delivered'


def test_invalid_json(rf, received):
    response = post(rf, 'not-json')

    assert response.status_code == 400
    assert received == []


def test_missing_reference(rf, received):
    response = post(rf, {'delivery_status': 'delivered'})

    assert response.status_code == 400
    assert received == []


def test_non_list_recipients_are_ignored(rf, received):
    response = post(rf, {'reference': 'AN-1', 'data': 5})

    assert response.status_code == 200
    assert received[0].reference == 'AN-1'
    assert received[0].data == []


def test_get_not_allowed(rf):
    response = delivery_callback(rf.get(reverse('delivery_callback')))

    assert response.status_code == 405


@override_settings(AIRTIMENIGERIA_CALLBACK_ALLOWED_IPS=['10.0.0.1'])
def test_ip_allowlist(rf, received):
    assert post(rf, REPORT, REMOTE_ADDR='192.168.1.5').status_code == 403
    assert post(rf, REPORT, REMOTE_ADDR='10.0.0.1').status_code == 200
    assert post(rf, REPORT, HTTP_X_FORWARDED_FOR='10.0.0.1, 172.16.0.1').status_code == 200
    assert len(received) == 2
