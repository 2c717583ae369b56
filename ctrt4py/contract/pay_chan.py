"""
payment channel contract
====
a creator loads tokens into a channel, the recipient collects signed payments.
channel fields are keyed by the channel id.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'pay_chan'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('CREATE_AND_LOAD', 0),
    ('EXTEND_EXPIRATION_TIME', 1),
    ('LOAD', 2),
    ('ABORT', 3),
    ('UNLOAD', 4),
    ('COLLECT_PAYMENT', 5),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('TOKEN_ID', 1),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('CONTRACT_BALANCE', 0),
    ('CHANNEL_CREATOR', 1),
    ('CHANNEL_CREATOR_PUBLIC_KEY', 2),
    ('CHANNEL_RECIPIENT', 3),
    ('CHANNEL_ACCUMULATED_LOAD', 4),
    ('CHANNEL_ACCUMULATED_PAYMENT', 5),
    ('CHANNEL_EXPIRATION_TIME', 6),
    ('CHANNEL_STATUS', 7),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class PayChanDBKey(DBKey):
    __slots__ = tuple()

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)

    @classmethod
    def for_tok_id(cls):
        return cls.for_state_var(StateVar.TOKEN_ID)

    @classmethod
    def for_ctrt_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.CONTRACT_BALANCE, addr)

    @classmethod
    def for_chan_creator(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_CREATOR, chan_id)

    @classmethod
    def for_chan_creator_pub_key(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_CREATOR_PUBLIC_KEY, chan_id)

    @classmethod
    def for_chan_recipient(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_RECIPIENT, chan_id)

    @classmethod
    def for_chan_accum_load(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_ACCUMULATED_LOAD, chan_id)

    @classmethod
    def for_chan_accum_pay(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_ACCUMULATED_PAYMENT, chan_id)

    @classmethod
    def for_chan_exp_time(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_EXPIRATION_TIME, chan_id)

    @classmethod
    def for_chan_status(cls, chan_id):
        return cls.for_b58_bytes_map(StateMapIdx.CHANNEL_STATUS, chan_id)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "PayChanDBKey",
]
