"""
nft contract v2
====
nft with a regulator list of users and contracts, as token contract v2.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.registry import _register
from ctrt4py.contract.nft import NFTDBKey

CTRT_TYPE_WHITELIST = 'nft_v2_whitelist'
CTRT_TYPE_BLACKLIST = 'nft_v2_blacklist'

_func_table = (
    ('SUPERSEDE', 0),
    ('ISSUE', 1),
    ('UPDATE_LIST', 2),
    ('SEND', 3),
    ('TRANSFER', 4),
    ('DEPOSIT', 5),
    ('WITHDRAW', 6),
)
_state_var_table = (
    ('ISSUER', 0),
    ('MAKER', 1),
    ('REGULATOR', 2),
)
_state_map_table = (
    ('IS_IN_LIST', 0),
)

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE_WHITELIST, _func_table)
StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE_WHITELIST, _state_var_table)
StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE_WHITELIST, _state_map_table)

BlacklistFuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE_BLACKLIST, _func_table)
BlacklistStateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE_BLACKLIST, _state_var_table)
BlacklistStateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE_BLACKLIST, _state_map_table)

_register(CTRT_TYPE_WHITELIST, FuncIdx, StateVar, StateMapIdx)
_register(CTRT_TYPE_BLACKLIST, BlacklistFuncIdx, BlacklistStateVar, BlacklistStateMapIdx)


class NFTV2DBKey(NFTDBKey):
    __slots__ = tuple()

    @classmethod
    def for_regulator(cls):
        return cls.for_state_var(StateVar.REGULATOR)

    @classmethod
    def for_is_user_in_list(cls, addr):
        return cls.for_addr_map(StateMapIdx.IS_IN_LIST, addr)

    @classmethod
    def for_is_ctrt_in_list(cls, ctrt_id):
        return cls.for_ctrt_acnt_map(StateMapIdx.IS_IN_LIST, ctrt_id)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "BlacklistFuncIdx",
    "BlacklistStateVar",
    "BlacklistStateMapIdx",
    "NFTV2DBKey",
]
