from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'nft'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('ISSUE', 1),
    ('SEND', 2),
    ('TRANSFER', 3),
    ('DEPOSIT', 4),
    ('WITHDRAW', 5),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('ISSUER', 0),
    ('MAKER', 1),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, ())

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class NFTDBKey(DBKey):
    __slots__ = tuple()

    @classmethod
    def for_issuer(cls):
        return cls.for_state_var(StateVar.ISSUER)

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "NFTDBKey",
]
