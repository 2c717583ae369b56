"""
option contract
====
option and proof tokens minted against locked target tokens,
exercised for base tokens at the fixed price before the deadline.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'v_option'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('ACTIVATE', 1),
    ('MINT', 2),
    ('UNLOCK', 3),
    ('EXECUTE', 4),
    ('COLLECT', 5),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('BASE_TOKEN_ID', 1),
    ('TARGET_TOKEN_ID', 2),
    ('OPTION_TOKEN_ID', 3),
    ('PROOF_TOKEN_ID', 4),
    ('EXECUTE_TIME', 5),
    ('EXECUTE_DEADLINE', 6),
    ('OPTION_STATUS', 7),
    ('MAX_ISSUE_NUM', 8),
    ('RESERVED_OPTION', 9),
    ('RESERVED_PROOF', 10),
    ('PRICE', 11),
    ('PRICE_UNIT', 12),
    ('TOKEN_LOCKED', 13),
    ('TOKEN_COLLECTED', 14),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('BASE_TOKEN_BALANCE', 0),
    ('TARGET_TOKEN_BALANCE', 1),
    ('OPTION_TOKEN_BALANCE', 2),
    ('PROOF_TOKEN_BALANCE', 3),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class VOptionDBKey(DBKey):
    __slots__ = tuple()

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)

    @classmethod
    def for_base_tok_id(cls):
        return cls.for_state_var(StateVar.BASE_TOKEN_ID)

    @classmethod
    def for_target_tok_id(cls):
        return cls.for_state_var(StateVar.TARGET_TOKEN_ID)

    @classmethod
    def for_option_tok_id(cls):
        return cls.for_state_var(StateVar.OPTION_TOKEN_ID)

    @classmethod
    def for_proof_tok_id(cls):
        return cls.for_state_var(StateVar.PROOF_TOKEN_ID)

    @classmethod
    def for_execute_time(cls):
        return cls.for_state_var(StateVar.EXECUTE_TIME)

    @classmethod
    def for_execute_deadline(cls):
        return cls.for_state_var(StateVar.EXECUTE_DEADLINE)

    @classmethod
    def for_option_status(cls):
        return cls.for_state_var(StateVar.OPTION_STATUS)

    @classmethod
    def for_max_issue_num(cls):
        return cls.for_state_var(StateVar.MAX_ISSUE_NUM)

    @classmethod
    def for_reserved_option(cls):
        return cls.for_state_var(StateVar.RESERVED_OPTION)

    @classmethod
    def for_reserved_proof(cls):
        return cls.for_state_var(StateVar.RESERVED_PROOF)

    @classmethod
    def for_price(cls):
        return cls.for_state_var(StateVar.PRICE)

    @classmethod
    def for_price_unit(cls):
        return cls.for_state_var(StateVar.PRICE_UNIT)

    @classmethod
    def for_tok_locked(cls):
        return cls.for_state_var(StateVar.TOKEN_LOCKED)

    @classmethod
    def for_tok_collected(cls):
        return cls.for_state_var(StateVar.TOKEN_COLLECTED)

    @classmethod
    def for_base_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.BASE_TOKEN_BALANCE, addr)

    @classmethod
    def for_target_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.TARGET_TOKEN_BALANCE, addr)

    @classmethod
    def for_option_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.OPTION_TOKEN_BALANCE, addr)

    @classmethod
    def for_proof_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.PROOF_TOKEN_BALANCE, addr)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "VOptionDBKey",
]
