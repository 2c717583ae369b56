from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'lock'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('LOCK', 0),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('TOKEN_ID', 1),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('CONTRACT_BALANCE', 0),
    ('CONTRACT_LOCK_TIME', 1),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class LockDBKey(DBKey):
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
    def for_ctrt_lock_time(cls, addr):
        return cls.for_addr_map(StateMapIdx.CONTRACT_LOCK_TIME, addr)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "LockDBKey",
]
