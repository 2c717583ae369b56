from ctrt4py.config import V
from ctrt4py.chain import ChainID
from ctrt4py.data_entry import DataStack
from ctrt4py.model.models import CtrtID, Str, VSYSTimestamp, ExecCtrtFee
from ctrt4py.tx_req import ExecCtrtFuncTxReq
from logging import getLogger

log = getLogger('ctrt4py')


class Ctrt(object):
    CTRT_TYPE = None

    def __init__(self, ctrt_id, api, chain_id=None):
        self.ctrt_id = ctrt_id if isinstance(ctrt_id, CtrtID) else CtrtID(ctrt_id)
        self.api = api
        if chain_id is None and V.CHAIN_ID is not None:
            chain_id = V.CHAIN_ID
        self.chain_id = None if chain_id is None else ChainID.from_str(chain_id)

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self.ctrt_id.data)

    def query_db_key(self, db_key):
        data = self.api.get_ctrt_data(self.ctrt_id.data, db_key.b58_str)
        log.debug("query {} key={} value={}".format(self, db_key.b58_str, data.get('value')))
        return data['value']

    def exec_tx_req(self, func_idx, *entries, attachment='', fee=None, timestamp=None):
        """request to execute the function, timestamp is now when None"""
        return ExecCtrtFuncTxReq(
            ctrt_id=self.ctrt_id,
            func_idx=func_idx,
            data_stack=DataStack(*entries),
            timestamp=VSYSTimestamp.now() if timestamp is None else timestamp,
            attachment=Str(attachment),
            fee=ExecCtrtFee.default() if fee is None else ExecCtrtFee(fee))


__all__ = [
    "Ctrt",
]
