from ctrt4py.config import C
from ctrt4py.model.models import Bytes, PubKey
from ctrt4py.model.packer import pack_u8, pack_u16, pack_u64
from logging import getLogger

log = getLogger('ctrt4py')


class ExecCtrtFuncTxReq(object):
    """request to execute a contract function, signed and broadcast by the caller"""
    __slots__ = ("ctrt_id", "func_idx", "data_stack", "timestamp", "attachment", "fee")
    TX_TYPE = C.TX_EXECUTE_CONTRACT_FUNCTION
    FEE_SCALE = C.FEE_SCALE

    def __init__(self, ctrt_id, func_idx, data_stack, timestamp, attachment, fee):
        if func_idx.kind != C.IDX_FUNC:
            raise TypeError('function index is FuncIdx but {} {}'.format(func_idx.kind, func_idx.name))
        self.ctrt_id = ctrt_id  # CtrtID
        self.func_idx = func_idx  # IndexEntry
        self.data_stack = data_stack  # DataStack
        self.timestamp = timestamp  # VSYSTimestamp
        self.attachment = attachment  # Str
        self.fee = fee  # ExecCtrtFee

    def __repr__(self):
        return "<ExecCtrtFuncTxReq {} {}.{} {} fee={}>".format(
            self.ctrt_id.data, self.func_idx.ctrt_type, self.func_idx.name, self.data_stack, self.fee.data)

    @property
    def data_to_sign(self):
        data_stack = self.data_stack.serialize()
        attachment = self.attachment.bytes
        return b''.join((
            pack_u8(self.TX_TYPE),
            self.ctrt_id.bytes,
            self.func_idx.serialize(),
            pack_u16(len(data_stack)),
            data_stack,
            pack_u16(len(attachment)),
            attachment,
            pack_u64(self.fee.data),
            pack_u16(self.FEE_SCALE),
            pack_u64(self.timestamp.data),
        ))

    def to_broadcast_execute_payload(self, pub_key, signature):
        """json body of /contract/broadcast/execute"""
        if isinstance(pub_key, str):
            pub_key = PubKey(pub_key)
        payload = {
            "senderPublicKey": pub_key.data,
            "contractId": self.ctrt_id.data,
            "functionIndex": self.func_idx.code,
            "functionData": Bytes(self.data_stack.serialize()).b58_str,
            "attachment": self.attachment.b58_str,
            "fee": self.fee.data,
            "feeScale": self.FEE_SCALE,
            "timestamp": self.timestamp.data,
            "signature": Bytes(signature).b58_str,
        }
        log.debug("execute payload {}".format(self))
        return payload


__all__ = [
    "ExecCtrtFuncTxReq",
]
