"""
atomic swap contract
====
hash locked token swap, each swap is keyed by the tx id of its lock.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'atomic_swap'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('LOCK', 0),
    ('SOLVE_PUZZLE', 1),
    ('EXPIRE_WITHDRAW', 2),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('TOKEN_ID', 1),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('CONTRACT_BALANCE', 0),
    ('SWAP_OWNER', 1),
    ('SWAP_RECIPIENT', 2),
    ('SWAP_PUZZLE', 3),
    ('SWAP_AMOUNT', 4),
    ('SWAP_EXPIRED_TIME', 5),
    ('SWAP_STATUS', 6),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class AtomicSwapDBKey(DBKey):
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
    def for_swap_owner(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_OWNER, tx_id)

    @classmethod
    def for_swap_recipient(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_RECIPIENT, tx_id)

    @classmethod
    def for_swap_puzzle(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_PUZZLE, tx_id)

    @classmethod
    def for_swap_amount(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_AMOUNT, tx_id)

    @classmethod
    def for_swap_expired_time(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_EXPIRED_TIME, tx_id)

    @classmethod
    def for_swap_status(cls, tx_id):
        return cls.for_b58_bytes_map(StateMapIdx.SWAP_STATUS, tx_id)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "AtomicSwapDBKey",
]
