"""
escrow contract
====
payer, recipient and judge of a work order, order fields are keyed by order id.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register

CTRT_TYPE = 'v_escrow'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('CREATE', 1),
    ('RECIPIENT_DEPOSIT', 2),
    ('JUDGE_DEPOSIT', 3),
    ('PAYER_CANCEL', 4),
    ('RECIPIENT_CANCEL', 5),
    ('JUDGE_CANCEL', 6),
    ('SUBMIT_WORK', 7),
    ('APPROVE_WORK', 8),
    ('APPLY_TO_JUDGE', 9),
    ('JUDGE', 10),
    ('SUBMIT_PENALTY', 11),
    ('PAYER_REFUND', 12),
    ('RECIPIENT_REFUND', 13),
    ('COLLECT', 14),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('JUDGE', 1),
    ('TOKEN_ID', 2),
    ('DURATION', 3),
    ('JUDGE_DURATION', 4),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    ('CONTRACT_BALANCE', 0),
    ('ORDER_PAYER', 1),
    ('ORDER_RECIPIENT', 2),
    ('ORDER_AMOUNT', 3),
    ('ORDER_RECIPIENT_DEPOSIT', 4),
    ('ORDER_JUDGE_DEPOSIT', 5),
    ('ORDER_FEE', 6),
    ('ORDER_RECIPIENT_AMOUNT', 7),
    ('ORDER_REFUND', 8),
    ('ORDER_RECIPIENT_REFUND', 9),
    ('ORDER_EXPIRATION_TIME', 10),
    ('ORDER_STATUS', 11),
    ('ORDER_RECIPIENT_DEPOSIT_STATUS', 12),
    ('ORDER_JUDGE_DEPOSIT_STATUS', 13),
    ('ORDER_SUBMIT_STATUS', 14),
    ('ORDER_JUDGE_STATUS', 15),
    ('ORDER_RECIPIENT_LOCKED_AMOUNT', 16),
    ('ORDER_JUDGE_LOCKED_AMOUNT', 17),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class VEscrowDBKey(DBKey):
    __slots__ = tuple()

    @classmethod
    def for_maker(cls):
        return cls.for_state_var(StateVar.MAKER)

    @classmethod
    def for_judge(cls):
        return cls.for_state_var(StateVar.JUDGE)

    @classmethod
    def for_tok_id(cls):
        return cls.for_state_var(StateVar.TOKEN_ID)

    @classmethod
    def for_duration(cls):
        return cls.for_state_var(StateVar.DURATION)

    @classmethod
    def for_judge_duration(cls):
        return cls.for_state_var(StateVar.JUDGE_DURATION)

    @classmethod
    def for_ctrt_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.CONTRACT_BALANCE, addr)

    @classmethod
    def for_order_payer(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_PAYER, order_id)

    @classmethod
    def for_order_recipient(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT, order_id)

    @classmethod
    def for_order_amount(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_AMOUNT, order_id)

    @classmethod
    def for_order_recipient_deposit(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT_DEPOSIT, order_id)

    @classmethod
    def for_order_judge_deposit(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_JUDGE_DEPOSIT, order_id)

    @classmethod
    def for_order_fee(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_FEE, order_id)

    @classmethod
    def for_order_recipient_amount(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT_AMOUNT, order_id)

    @classmethod
    def for_order_refund(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_REFUND, order_id)

    @classmethod
    def for_order_recipient_refund(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT_REFUND, order_id)

    @classmethod
    def for_order_exp_time(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_EXPIRATION_TIME, order_id)

    @classmethod
    def for_order_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_STATUS, order_id)

    @classmethod
    def for_order_recipient_deposit_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT_DEPOSIT_STATUS, order_id)

    @classmethod
    def for_order_judge_deposit_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_JUDGE_DEPOSIT_STATUS, order_id)

    @classmethod
    def for_order_submit_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_SUBMIT_STATUS, order_id)

    @classmethod
    def for_order_judge_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_JUDGE_STATUS, order_id)

    @classmethod
    def for_order_recipient_locked_amount(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_RECIPIENT_LOCKED_AMOUNT, order_id)

    @classmethod
    def for_order_judge_locked_amount(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_JUDGE_LOCKED_AMOUNT, order_id)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "VEscrowDBKey",
]
