"""
stable swap contract
====
order book of fixed price swap between a base token and a target token.
the maker sets orders, users swap against an order by its order id.
"""

from ctrt4py.config import C
from ctrt4py.contract.catalog import IndexCatalog
from ctrt4py.contract.ctrt import Ctrt
from ctrt4py.contract.dbkey import DBKey
from ctrt4py.contract.registry import _register
from ctrt4py import data_entry as de
from ctrt4py.model.models import Addr, TokenID, Token

CTRT_TYPE = 'stable_swap'

FuncIdx = IndexCatalog(C.IDX_FUNC, CTRT_TYPE, (
    ('SUPERSEDE', 0),
    ('SET_ORDER', 1),
    ('UPDATE_ORDER', 2),
    ('ORDER_DEPOSIT', 3),
    ('ORDER_WITHDRAW', 4),
    ('CLOSE_ORDER', 5),
    ('SWAP_BASE_TO_TARGET', 6),
    ('SWAP_TARGET_TO_BASE', 7),
))

StateVar = IndexCatalog(C.IDX_STATE_VAR, CTRT_TYPE, (
    ('MAKER', 0),
    ('BASE_TOKEN_ID', 1),
    ('TARGET_TOKEN_ID', 2),
    ('MAX_ORDER_PER_USER', 3),
    ('UNIT_PRICE_BASE', 4),
    ('UNIT_PRICE_TARGET', 5),
))

StateMapIdx = IndexCatalog(C.IDX_STATE_MAP, CTRT_TYPE, (
    # keyed by address
    ('BASE_TOKEN_BALANCE', 0),
    ('TARGET_TOKEN_BALANCE', 1),
    ('USER_ORDERS', 2),
    # keyed by order id
    ('ORDER_OWNER', 3),
    ('FEE_BASE', 4),
    ('FEE_TARGET', 5),
    ('MIN_BASE', 6),
    ('MAX_BASE', 7),
    ('MIN_TARGET', 8),
    ('MAX_TARGET', 9),
    ('PRICE_BASE', 10),
    ('PRICE_TARGET', 11),
    ('BASE_TOKEN_LOCKED', 12),
    ('TARGET_TOKEN_LOCKED', 13),
    ('ORDER_STATUS', 14),
))

_register(CTRT_TYPE, FuncIdx, StateVar, StateMapIdx)


class StableSwapDBKey(DBKey):
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
    def for_max_order_per_user(cls):
        return cls.for_state_var(StateVar.MAX_ORDER_PER_USER)

    @classmethod
    def for_base_price_unit(cls):
        return cls.for_state_var(StateVar.UNIT_PRICE_BASE)

    @classmethod
    def for_target_price_unit(cls):
        return cls.for_state_var(StateVar.UNIT_PRICE_TARGET)

    @classmethod
    def for_base_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.BASE_TOKEN_BALANCE, addr)

    @classmethod
    def for_target_tok_bal(cls, addr):
        return cls.for_addr_map(StateMapIdx.TARGET_TOKEN_BALANCE, addr)

    @classmethod
    def for_user_orders(cls, addr):
        return cls.for_addr_map(StateMapIdx.USER_ORDERS, addr)

    @classmethod
    def for_order_owner(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_OWNER, order_id)

    @classmethod
    def for_fee_base(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.FEE_BASE, order_id)

    @classmethod
    def for_fee_target(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.FEE_TARGET, order_id)

    @classmethod
    def for_min_base(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.MIN_BASE, order_id)

    @classmethod
    def for_max_base(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.MAX_BASE, order_id)

    @classmethod
    def for_min_target(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.MIN_TARGET, order_id)

    @classmethod
    def for_max_target(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.MAX_TARGET, order_id)

    @classmethod
    def for_price_base(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.PRICE_BASE, order_id)

    @classmethod
    def for_price_target(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.PRICE_TARGET, order_id)

    @classmethod
    def for_base_tok_locked(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.BASE_TOKEN_LOCKED, order_id)

    @classmethod
    def for_target_tok_locked(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.TARGET_TOKEN_LOCKED, order_id)

    @classmethod
    def for_order_status(cls, order_id):
        return cls.for_b58_bytes_map(StateMapIdx.ORDER_STATUS, order_id)


class StableSwapCtrt(Ctrt):
    """
    client of a deployed stable swap contract
    getters query the node, function methods return ExecCtrtFuncTxReq to sign
    token units are queried from the node once unless given
    """
    CTRT_TYPE = CTRT_TYPE

    def __init__(self, ctrt_id, api, chain_id=None, base_tok_unit=None, target_tok_unit=None):
        super().__init__(ctrt_id, api, chain_id)
        self.base_tok_id = None
        self.target_tok_id = None
        self.base_tok_unit = base_tok_unit
        self.target_tok_unit = target_tok_unit

    # state getters

    def get_maker(self):
        return Addr(self.query_db_key(StableSwapDBKey.for_maker()))

    def get_base_tok_id(self):
        if self.base_tok_id is None:
            self.base_tok_id = TokenID(self.query_db_key(StableSwapDBKey.for_base_tok_id()))
        return self.base_tok_id

    def get_target_tok_id(self):
        if self.target_tok_id is None:
            self.target_tok_id = TokenID(self.query_db_key(StableSwapDBKey.for_target_tok_id()))
        return self.target_tok_id

    def get_base_tok_unit(self):
        if self.base_tok_unit is None:
            self.base_tok_unit = self.api.get_tok_unit(self.get_base_tok_id().data)
        return self.base_tok_unit

    def get_target_tok_unit(self):
        if self.target_tok_unit is None:
            self.target_tok_unit = self.api.get_tok_unit(self.get_target_tok_id().data)
        return self.target_tok_unit

    def get_max_order_per_user(self):
        return self.query_db_key(StableSwapDBKey.for_max_order_per_user())

    def get_base_price_unit(self):
        return self.query_db_key(StableSwapDBKey.for_base_price_unit())

    def get_target_price_unit(self):
        return self.query_db_key(StableSwapDBKey.for_target_price_unit())

    def _base_tok(self, db_key):
        return Token(self.query_db_key(db_key), self.get_base_tok_unit())

    def _target_tok(self, db_key):
        return Token(self.query_db_key(db_key), self.get_target_tok_unit())

    def get_base_tok_bal(self, addr):
        return self._base_tok(StableSwapDBKey.for_base_tok_bal(addr))

    def get_target_tok_bal(self, addr):
        return self._target_tok(StableSwapDBKey.for_target_tok_bal(addr))

    def get_user_orders(self, addr):
        return self.query_db_key(StableSwapDBKey.for_user_orders(addr))

    def get_order_owner(self, order_id):
        return Addr(self.query_db_key(StableSwapDBKey.for_order_owner(order_id)))

    def get_fee_base(self, order_id):
        return self._base_tok(StableSwapDBKey.for_fee_base(order_id))

    def get_fee_target(self, order_id):
        return self._target_tok(StableSwapDBKey.for_fee_target(order_id))

    def get_min_base(self, order_id):
        return self._base_tok(StableSwapDBKey.for_min_base(order_id))

    def get_max_base(self, order_id):
        return self._base_tok(StableSwapDBKey.for_max_base(order_id))

    def get_min_target(self, order_id):
        return self._target_tok(StableSwapDBKey.for_min_target(order_id))

    def get_max_target(self, order_id):
        return self._target_tok(StableSwapDBKey.for_max_target(order_id))

    def get_price_base(self, order_id):
        return self._base_tok(StableSwapDBKey.for_price_base(order_id))

    def get_price_target(self, order_id):
        return self._target_tok(StableSwapDBKey.for_price_target(order_id))

    def get_base_tok_locked(self, order_id):
        return self._base_tok(StableSwapDBKey.for_base_tok_locked(order_id))

    def get_target_tok_locked(self, order_id):
        return self._target_tok(StableSwapDBKey.for_target_tok_locked(order_id))

    def get_order_status(self, order_id):
        status = self.query_db_key(StableSwapDBKey.for_order_status(order_id))
        return status is True or status == 'true'

    # function requests

    def supersede(self, new_owner, **kwargs):
        addr = Addr(new_owner)
        if self.chain_id is not None:
            addr.must_on(self.chain_id)
        return self.exec_tx_req(FuncIdx.SUPERSEDE, de.Addr(addr), **kwargs)

    def set_order(self, fee_base, fee_target, min_base, max_base, min_target, max_target,
                  price_base, price_target, base_deposit, target_deposit, **kwargs):
        base_unit = self.get_base_tok_unit()
        target_unit = self.get_target_tok_unit()
        base_price_unit = self.get_base_price_unit()
        target_price_unit = self.get_target_price_unit()
        return self.exec_tx_req(
            FuncIdx.SET_ORDER,
            de.Amount.for_tok_amount(fee_base, base_unit),
            de.Amount.for_tok_amount(fee_target, target_unit),
            de.Amount.for_tok_amount(min_base, base_unit),
            de.Amount.for_tok_amount(max_base, base_unit),
            de.Amount.for_tok_amount(min_target, target_unit),
            de.Amount.for_tok_amount(max_target, target_unit),
            de.Amount.for_tok_amount(price_base, base_price_unit),
            de.Amount.for_tok_amount(price_target, target_price_unit),
            de.Amount.for_tok_amount(base_deposit, base_unit),
            de.Amount.for_tok_amount(target_deposit, target_unit),
            **kwargs)

    def update_order(self, order_id, fee_base, fee_target, min_base, max_base, min_target, max_target,
                     price_base, price_target, **kwargs):
        base_unit = self.get_base_tok_unit()
        target_unit = self.get_target_tok_unit()
        base_price_unit = self.get_base_price_unit()
        target_price_unit = self.get_target_price_unit()
        return self.exec_tx_req(
            FuncIdx.UPDATE_ORDER,
            de.Bytes.from_str(order_id),
            de.Amount.for_tok_amount(fee_base, base_unit),
            de.Amount.for_tok_amount(fee_target, target_unit),
            de.Amount.for_tok_amount(min_base, base_unit),
            de.Amount.for_tok_amount(max_base, base_unit),
            de.Amount.for_tok_amount(min_target, target_unit),
            de.Amount.for_tok_amount(max_target, target_unit),
            de.Amount.for_tok_amount(price_base, base_price_unit),
            de.Amount.for_tok_amount(price_target, target_price_unit),
            **kwargs)

    def order_deposit(self, order_id, base_deposit, target_deposit, **kwargs):
        return self.exec_tx_req(
            FuncIdx.ORDER_DEPOSIT,
            de.Bytes.from_str(order_id),
            de.Amount.for_tok_amount(base_deposit, self.get_base_tok_unit()),
            de.Amount.for_tok_amount(target_deposit, self.get_target_tok_unit()),
            **kwargs)

    def order_withdraw(self, order_id, base_withdraw, target_withdraw, **kwargs):
        return self.exec_tx_req(
            FuncIdx.ORDER_WITHDRAW,
            de.Bytes.from_str(order_id),
            de.Amount.for_tok_amount(base_withdraw, self.get_base_tok_unit()),
            de.Amount.for_tok_amount(target_withdraw, self.get_target_tok_unit()),
            **kwargs)

    def close_order(self, order_id, **kwargs):
        return self.exec_tx_req(FuncIdx.CLOSE_ORDER, de.Bytes.from_str(order_id), **kwargs)

    def swap_base_to_target(self, order_id, amount, swap_fee, price, deadline, **kwargs):
        """deadline is unix timestamp in milliseconds"""
        base_unit = self.get_base_tok_unit()
        return self.exec_tx_req(
            FuncIdx.SWAP_BASE_TO_TARGET,
            de.Bytes.from_str(order_id),
            de.Amount.for_tok_amount(amount, base_unit),
            de.Amount.for_tok_amount(swap_fee, base_unit),
            de.Amount.for_tok_amount(price, self.get_base_price_unit()),
            de.Timestamp.from_unix_ts(deadline),
            **kwargs)

    def swap_target_to_base(self, order_id, amount, swap_fee, price, deadline, **kwargs):
        """deadline is unix timestamp in milliseconds"""
        target_unit = self.get_target_tok_unit()
        return self.exec_tx_req(
            FuncIdx.SWAP_TARGET_TO_BASE,
            de.Bytes.from_str(order_id),
            de.Amount.for_tok_amount(amount, target_unit),
            de.Amount.for_tok_amount(swap_fee, target_unit),
            de.Amount.for_tok_amount(price, self.get_target_price_unit()),
            de.Timestamp.from_unix_ts(deadline),
            **kwargs)


__all__ = [
    "FuncIdx",
    "StateVar",
    "StateMapIdx",
    "StableSwapDBKey",
    "StableSwapCtrt",
]
