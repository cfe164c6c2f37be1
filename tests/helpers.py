import json

import requests


def make_response(body, status_code=200):
    """Build a real requests.Response carrying ``body`` (dict/list or raw str)."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, str):
        response._content = body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
    response.encoding = 'utf-8'
    return response


PLANS = [
    {
        'network_operator': 'mtn',
        'plan_summary': 'MTN 1GB - 30 days',
        'package_code': 'MTN_1GB_30DAYS',
        'plan_id': 101,
        'validity': '30 days',
        'regular_price': 300,
        'agent_price': 290,
        'dealer_price': 280,
        'currency': 'NGN',
    },
    {
        'network_operator': 'airtel',
        'plan_summary': 'Airtel 2GB - 30 days',
        'package_code': 'AIRTEL_2GB_30DAYS',
        'plan_id': 202,
        'validity': '30 days',
        'regular_price': 600,
        'agent_price': 590,
        'dealer_price': 580,
        'currency': 'NGN',
    },
    {
        'network_operator': 'mtn',
        'plan_summary': 'MTN 500MB promo',
        'package_code': 'MTN_500MB_FREE',
        'plan_id': 103,
        'validity': '1 day',
        'regular_price': 0,
        'agent_price': 0,
        'dealer_price': None,
        'currency': 'NGN',
    },
]
