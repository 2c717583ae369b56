from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'v_swap'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('SET_SWAP', 1),
    ('ADD_LIQUIDITY', 2),
    ('REMOVE_LIQUIDITY', 3),
    ('SWAP_B_FOR_EXACT_A', 4),
    ('SWAP_EXACT_B_FOR_A', 5),
    ('SWAP_A_FOR_EXACT_B', 6),
    ('SWAP_EXACT_A_FOR_B', 7),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('TOKEN_A_ID', 1),
    ('TOKEN_B_ID', 2),
    ('LIQUIDITY_TOKEN_ID', 3),
    ('SWAP_STATUS', 4),
    ('MINIMUM_LIQUIDITY', 5),
    ('TOKEN_A_RESERVED', 6),
    ('TOKEN_B_RESERVED', 7),
    ('TOTAL_SUPPLY', 8),
    ('LIQUIDITY_TOKEN_LEFT', 9),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('TOKEN_A_BALANCE', 0),
    ('TOKEN_B_BALANCE', 1),
    ('LIQUIDITY_TOKEN_BALANCE', 2),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class VSwapDBKey(DBKey):
    """keys of the automated market maker swap contract"""
    __slots__ = tuple()

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)

    @classmethod
    def for_tok_a_id(cls):
        return cls.for_state_var(StateVar.TOKEN_A_ID)

    @classmethod
    def for_tok_b_id(cls):
        return cls.for_state_var(StateVar.TOKEN_B_ID)

    @classmethod
    def for_liq_tok_id(cls):
        return cls.for_state_var(StateVar.LIQUIDITY_TOKEN_ID)

    @classmethod
    def for_swap_status(cls):
        return cls.for_state_var(StateVar.SWAP_STATUS)

    @classmethod
    def for_min_liq(cls):
        return cls.for_state_var(StateVar.MINIMUM_LIQUIDITY)

    @classmethod
    def for_tok_a_reserved(cls):
        return cls.for_state_var(StateVar.TOKEN_A_RESERVED)

    @classmethod
    def for_tok_b_reserved(cls):
        return cls.for_state_var(StateVar.TOKEN_B_RESERVED)

    @classmethod
    def for_total_supply(cls):
        return cls.for_state_var(StateVar.TOTAL_SUPPLY)

    @classmethod
    def for_liq_tok_left(cls):
        return cls.for_state_var(StateVar.LIQUIDITY_TOKEN_LEFT)

    @classmethod
    def for_tok_a_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.TOKEN_A_BALANCE, addr)

    @classmethod
    def for_tok_b_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.TOKEN_B_BALANCE, addr)

    @classmethod
    def for_liq_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.LIQUIDITY_TOKEN_BALANCE, addr)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "VSwapDBKey",
]
