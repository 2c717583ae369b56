from ctrt4py.config import V, NodeAPIError
from requests import get, post
from logging import getLogger

log = getLogger('ctrt4py')


class NodeAPI(object):
    """RESTful api of the full node, default params from V"""

    def __init__(self, endpoint=None, api_key=None, timeout=None):
        self.endpoint = (endpoint or V.API_ENDPOINT or '').rstrip('/')
        self.api_key = V.API_KEY if api_key is None else api_key
        self.timeout = timeout or V.API_TIMEOUT
        if not self.endpoint:
            raise NodeAPIError('api endpoint is not set')

    def __repr__(self):
        return "<NodeAPI {}>".format(self.endpoint)

    @property
    def headers(self):
        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['api_key'] = self.api_key
        return headers

    def api_get(self, edpt):
        url = self.endpoint + edpt
        r = get(url=url, headers=self.headers, timeout=self.timeout)
        if not r.ok:
            raise NodeAPIError('GET {} failed status={} {}'.format(edpt, r.status_code, r.text))
        log.debug("GET {}".format(edpt))
        return r.json()

    def api_post(self, edpt, data):
        url = self.endpoint + edpt
        r = post(url=url, json=data, headers=self.headers, timeout=self.timeout)
        if not r.ok:
            raise NodeAPIError('POST {} failed status={} {}'.format(edpt, r.status_code, r.text))
        log.debug("POST {}".format(edpt))
        return r.json()

    def get_height(self):
        return self.api_get('/blocks/height')['height']

    def get_ctrt_data(self, ctrt_id, db_key):
        """db_key is base58 text"""
        return self.api_get('/contract/data/{}/{}'.format(ctrt_id, db_key))

    def get_tok_info(self, tok_id):
        return self.api_get('/contract/tokenInfo/{}'.format(tok_id))

    def get_tok_unit(self, tok_id):
        return self.get_tok_info(tok_id)['unity']

    def get_tok_bal(self, addr, tok_id):
        return self.api_get('/contract/balance/{}/{}'.format(addr, tok_id))

    def get_last_tok_idx(self, ctrt_id):
        return self.api_get('/contract/lastTokenIndex/{}'.format(ctrt_id))['lastTokenIndex']

    def broadcast_execute(self, payload):
        return self.api_post('/contract/broadcast/execute', payload)


__all__ = [
    "NodeAPI",
]
