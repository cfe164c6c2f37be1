import json
from unittest import mock

import pytest
import requests
from urllib3.exceptions import ReadTimeoutError

from airtimenigeria.exceptions import (
    ConfigurationError,
    NetworkError,
    RequestTimeoutError,
    ResponseParseError,
)
from airtimenigeria.utils.http_client import APIResponse, HTTPClient
from tests.helpers import make_response


@pytest.fixture
def http_client():
    return HTTPClient('https://api.example.test/api/v1/', 'secret-token', timeout=7)


def test_get_request_headers_and_url(http_client, mock_session):
    mock_session.return_value = make_response({'success': True, 'status': 'ok'})

    response = http_client.request('/balance')

    assert response == APIResponse(status_code=200, data={'success': True, 'status': 'ok'})
    method, url = mock_session.call_args[0]
    kwargs = mock_session.call_args[1]
    assert method == 'GET'
    assert url == 'https://api.example.test/api/v1/balance'
    assert kwargs['data'] is None
    assert kwargs['timeout'] == 7
    assert kwargs['headers'] == {
        'Authorization': 'Bearer secret-token',
        'Accept': 'application/json',
        'Content-Type': 'application/json',
    }


def test_post_request_serializes_body(http_client, mock_session):
    http_client.post('/airtime', {'phone': '08012345678', 'amount': 100})

    method, url = mock_session.call_args[0]
    kwargs = mock_session.call_args[1]
    assert method == 'POST'
    assert url == 'https://api.example.test/api/v1/airtime'
    assert json.loads(kwargs['data']) == {'phone': '08012345678', 'amount': 100}
    assert kwargs['headers']['Content-Length'] == str(len(kwargs['data']))


def test_plain_http_base_url_is_allowed(mock_session):
    HTTPClient('http://localhost:8000', 'token').get('data/plans')

    assert mock_session.call_args[0][1] == 'http://localhost:8000/data/plans'


def test_unsupported_scheme_is_rejected():
    with pytest.raises(ConfigurationError):
        HTTPClient('ftp://api.example.test', 'token')


def test_status_code_is_not_interpreted(http_client, mock_session):
    mock_session.return_value = make_response(
        {'success': False, 'message': 'Insufficient balance'}, status_code=402
    )

    response = http_client.post('/data', {'phone': '08012345678'})

    assert response.status_code == 402
    assert response.data['message'] == 'Insufficient balance'


def test_timeout_raises_timeout_error(http_client, mock_session):
    mock_session.side_effect = requests.ReadTimeout('read timed out')

    with pytest.raises(RequestTimeoutError, match='Request timeout'):
        http_client.get('/balance')


def test_connect_timeout_is_a_timeout(http_client, mock_session):
    mock_session.side_effect = requests.ConnectTimeout('connect timed out')

    with pytest.raises(RequestTimeoutError):
        http_client.get('/balance')


def test_stalled_body_read_is_a_timeout(http_client, mock_session):
    mock_session.side_effect = requests.ConnectionError(
        ReadTimeoutError(None, None, 'Read timed out.')
    )

    with pytest.raises(RequestTimeoutError, match='Request timeout'):
        http_client.get('/data/plans')


def test_connection_failure_raises_network_error(http_client, mock_session):
    mock_session.side_effect = requests.ConnectionError('Connection refused')

    with pytest.raises(NetworkError) as exc:
        http_client.get('/balance')
    assert str(exc.value) == 'Request failed: Connection refused'


def test_invalid_json_raises_parse_error(http_client, mock_session):
    mock_session.return_value = make_response('<html>Bad gateway</html>', status_code=502)

    with pytest.raises(ResponseParseError) as exc:
        http_client.get('/data/plans')

    assert str(exc.value).startswith('Failed to parse response: ')
    assert 'Expecting value' in str(exc.value)
    assert exc.value.error_code == 502


def test_token_is_masked_in_logs(http_client, mock_session, caplog):
    with caplog.at_level('DEBUG', logger='airtimenigeria.utils.http_client'):
        http_client.get('/balance')

    assert 'secret-token' not in caplog.text
    assert 'Bearer ***' in caplog.text


def test_each_call_uses_its_own_session(http_client, mock_session):
    with mock.patch.object(requests, 'Session', wraps=requests.Session) as session_cls:
        http_client.get('/balance')
        http_client.get('/balance')

    assert session_cls.call_count == 2
