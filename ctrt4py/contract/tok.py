"""
token contracts
====
with split and without split share the state vars, only function indexes differ.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'tok'
CTRT_TYPE_SPLIT = 'tok_split'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('ISSUE', 1),
    ('DESTROY', 2),
    ('SEND', 3),
    ('TRANSFER', 4),
    ('DEPOSIT', 5),
    ('WITHDRAW', 6),
    ('TOTAL_SUPPLY', 7),
    ('MAX_SUPPLY', 8),
    ('BALANCE_OF', 9),
    ('GET_ISSUER', 10),
))

SplitFuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE_SPLIT, (
    ('SUPERSEDE', 0),
    ('ISSUE', 1),
    ('DESTROY', 2),
    ('SPLIT', 3),
    ('SEND', 4),
    ('TRANSFER', 5),
    ('DEPOSIT', 6),
    ('WITHDRAW', 7),
    ('TOTAL_SUPPLY', 8),
    ('MAX_SUPPLY', 9),
    ('BALANCE_OF', 10),
    ('GET_ISSUER', 11),
))

_state_var_table = (
    ('ISSUER', 0),
    ('MAKER', 1),
)
StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, _state_var_table)
SplitStateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE_SPLIT, _state_var_table)

# token balances are kept by the node, not in contract state
StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, ())
SplitStateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE_SPLIT, ())

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)
_register(CTRT_TYPE_SPLIT, SplitFuncIdx, SplitStateVar, SplitStateMapIdx)


class TokDBKey(DBKey):
    __slots__ = tuple()

    @classmethod
    def for_issuer(cls):
        return cls.for_state_var(StateVar.ISSUER)

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)


__all__ = [
    "FuncIdx",
    "SplitFuncIdx",
    "StateVar",
    "SplitStateVar",
    "StateMapIdx",
    "SplitStateMapIdx",
    "TokDBKey",
]
