from ctrt4py.config import V, NodeAPIError
from ctrt4py import api as api_module
from ctrt4py.api import NodeAPI
import pytest


class FakeResponse(object):
    def __init__(self, status_code, body):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self.body = body
        self.text = str(body)

    def json(self):
        return self.body


@pytest.fixture
def calls(monkeypatch):
    calls = list()

    def fake_get(url, headers, timeout):
        calls.append(('GET', url, headers, None))
        if url.endswith('/missing'):
            return FakeResponse(404, {'error': 'not found'})
        if url.endswith('/blocks/height'):
            return FakeResponse(200, {'height': 1234})
        if '/contract/lastTokenIndex/' in url:
            return FakeResponse(200, {'contractId': url.rsplit('/', 1)[1], 'lastTokenIndex': 2})
        if '/contract/tokenInfo/' in url:
            return FakeResponse(200, {'tokenId': url.rsplit('/', 1)[1], 'unity': 100})
        return FakeResponse(200, {'value': 1})

    def fake_post(url, json, headers, timeout):
        calls.append(('POST', url, headers, json))
        return FakeResponse(200, {'id': 'tx'})

    monkeypatch.setattr(api_module, 'get', fake_get)
    monkeypatch.setattr(api_module, 'post', fake_post)
    return calls


def test_endpoint_required(monkeypatch):
    monkeypatch.setattr(V, 'API_ENDPOINT', None)
    with pytest.raises(NodeAPIError):
        NodeAPI()


def test_default_from_v(monkeypatch):
    monkeypatch.setattr(V, 'API_ENDPOINT', 'http://127.0.0.1:9924/')
    monkeypatch.setattr(V, 'API_KEY', 'secret')
    api = NodeAPI()
    assert api.endpoint == 'http://127.0.0.1:9924'
    assert api.headers['api_key'] == 'secret'
    assert 'api_key' not in NodeAPI(api_key='').headers


def test_get_ctrt_data(calls):
    api = NodeAPI('http://node')
    assert api.get_ctrt_data('CTRT', 'KEY') == {'value': 1}
    assert calls[0][:2] == ('GET', 'http://node/contract/data/CTRT/KEY')


def test_get_tok_unit(calls):
    api = NodeAPI('http://node')
    assert api.get_tok_unit('TOK') == 100
    assert calls[0][1] == 'http://node/contract/tokenInfo/TOK'


def test_broadcast_execute(calls):
    api = NodeAPI('http://node')
    assert api.broadcast_execute({'fee': 1}) == {'id': 'tx'}
    assert calls[0][0] == 'POST'
    assert calls[0][1] == 'http://node/contract/broadcast/execute'
    assert calls[0][3] == {'fee': 1}


def test_not_ok(calls):
    api = NodeAPI('http://node')
    with pytest.raises(NodeAPIError):
        api.api_get('/missing')


def test_get_height(calls):
    api = NodeAPI('http://node')
    assert api.get_height() == 1234
    assert calls[0][1] == 'http://node/blocks/height'


def test_get_tok_bal(calls):
    api = NodeAPI('http://node')
    assert api.get_tok_bal('ADDR', 'TOK') == {'value': 1}
    assert calls[0][1] == 'http://node/contract/balance/ADDR/TOK'


def test_get_last_tok_idx(calls):
    api = NodeAPI('http://node')
    assert api.get_last_tok_idx('CTRT') == 2
    assert calls[0][1] == 'http://node/contract/lastTokenIndex/CTRT'
