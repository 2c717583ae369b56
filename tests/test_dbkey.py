from ctrt4py.config import C, InvalidFormat, MalformedValue, UnknownIndexCode, UnsupportedContractType
from ctrt4py.chain import ChainID
from ctrt4py.contract import *
from ctrt4py.model import models as md
from ctrt4py import data_entry as de
from itertools import combinations
import pytest


ADDR = md.Addr.from_pub_key(md.PubKey.from_bytes(b'\x01' * 32), ChainID.TEST_NET)
ADDR2 = md.Addr.from_pub_key(md.PubKey.from_bytes(b'\x02' * 32), ChainID.TEST_NET)
ORDER_ID = md.Bytes(b'\x11' * 32).b58_str
ORDER_ID2 = md.Bytes(b'\x22' * 32).b58_str

ADDR_KEYS = (
    StableSwapDBKey.for_base_tok_bal,
    StableSwapDBKey.for_target_tok_bal,
    StableSwapDBKey.for_user_orders,
)
ORDER_KEYS = (
    StableSwapDBKey.for_order_owner,
    StableSwapDBKey.for_fee_base,
    StableSwapDBKey.for_fee_target,
    StableSwapDBKey.for_min_base,
    StableSwapDBKey.for_max_base,
    StableSwapDBKey.for_min_target,
    StableSwapDBKey.for_max_target,
    StableSwapDBKey.for_price_base,
    StableSwapDBKey.for_price_target,
    StableSwapDBKey.for_base_tok_locked,
    StableSwapDBKey.for_target_tok_locked,
    StableSwapDBKey.for_order_status,
)
STATE_VAR_KEYS = (
    StableSwapDBKey.for_maker,
    StableSwapDBKey.for_base_tok_id,
    StableSwapDBKey.for_target_tok_id,
    StableSwapDBKey.for_max_order_per_user,
    StableSwapDBKey.for_base_price_unit,
    StableSwapDBKey.for_target_price_unit,
)


def all_stable_swap_keys():
    keys = [f() for f in STATE_VAR_KEYS]
    for addr in (ADDR, ADDR2):
        keys += [f(addr.data) for f in ADDR_KEYS]
    for order_id in (ORDER_ID, ORDER_ID2, '1'):
        keys += [f(order_id) for f in ORDER_KEYS]
    return keys


def test_maker_key():
    """maker key is the single byte of StateVar code 0"""
    key = StableSwapDBKey.for_maker()
    assert key.data == b'\x00'
    assert key.data == stable_swap.StateVar.serialize(0)
    assert isinstance(key, DBKey)
    assert key.b58_str == '1'


def test_state_var_keys():
    assert [f().data for f in STATE_VAR_KEYS] == [bytes([i]) for i in range(6)]


def test_base_tok_bal_key():
    """map index 0 then the encoded address entry"""
    key = StableSwapDBKey.for_base_tok_bal(ADDR.data)
    assert key.data == b'\x00' + b'\x02' + ADDR.bytes
    assert key.data == stable_swap.StateMapIdx.serialize(0) + de.Addr(ADDR).serialize()
    assert len(key) == 1 + 1 + C.ADDR_BYTES_LEN


def test_order_key_fixture():
    # base58 '2' is one byte 0x01
    assert StableSwapDBKey.for_order_owner('2').data == b'\x03\x0b\x00\x01\x01'
    assert StableSwapDBKey.for_order_status('2').data == b'\x0e\x0b\x00\x01\x01'
    key = StableSwapDBKey.for_fee_base(ORDER_ID)
    assert key.data == b'\x04\x0b\x00\x20' + b'\x11' * 32


def test_invalid_order_id():
    """not base58 order id makes no key"""
    with pytest.raises(InvalidFormat):
        StableSwapDBKey.for_order_owner('0OIl')
    for f in ORDER_KEYS:
        with pytest.raises(InvalidFormat):
            f('0OIl')
        with pytest.raises(InvalidFormat):
            f('2 \n')
        with pytest.raises(InvalidFormat):
            f(' 2')


def test_invalid_addr():
    for f in ADDR_KEYS:
        with pytest.raises(InvalidFormat):
            f('0OIl')
        with pytest.raises(InvalidFormat):
            f(ORDER_ID)
        with pytest.raises(InvalidFormat):
            f(ADDR.data + '\n')
        with pytest.raises(InvalidFormat):
            f(' ' + ADDR.data)


def test_key_determinism():
    assert [k.data for k in all_stable_swap_keys()] == [k.data for k in all_stable_swap_keys()]
    assert StableSwapDBKey.for_min_target(ORDER_ID) == StableSwapDBKey.for_min_target(ORDER_ID)


def test_key_distinctness():
    keys = [k.data for k in all_stable_swap_keys()]
    for a, b in combinations(keys, 2):
        assert a != b
    assert len(keys) == 6 + 3 * 2 + 12 * 3


def test_state_map_and_builder():
    idx = stable_swap.StateMapIdx.USER_ORDERS
    sub_key = de.Addr(ADDR)
    assert StateMap(idx, sub_key).serialize() == build_map_key(idx, sub_key)
    assert DBKey.for_state_map(idx, sub_key).data == b'\x02\x02' + ADDR.bytes
    with pytest.raises(TypeError):
        build_map_key(stable_swap.StateVar.MAKER, sub_key)
    with pytest.raises(TypeError):
        DBKey.for_state_var(idx)


def test_other_contract_keys():
    assert VSwapDBKey.for_liq_tok_left().data == b'\x09'
    assert VSwapDBKey.for_tok_a_bal(ADDR.data).data == b'\x00\x02' + ADDR.bytes
    assert VSwapDBKey.for_tok_b_bal(ADDR.data).data == b'\x01\x02' + ADDR.bytes
    assert VSwapDBKey.for_liq_tok_bal(ADDR.data).data == b'\x02\x02' + ADDR.bytes
    assert LockDBKey.for_tok_id().data == b'\x01'
    assert LockDBKey.for_ctrt_lock_time(ADDR.data).data == b'\x01\x02' + ADDR.bytes
    assert TokDBKey.for_issuer().data == b'\x00'
    assert TokDBKey.for_maker().data == b'\x01'
    assert NFTDBKey.for_maker().data == b'\x01'


def test_describe_db_key():
    info = describe_db_key('stable_swap', StableSwapDBKey.for_maker())
    assert info == (C.IDX_STATE_VAR, 'MAKER', None)
    info = describe_db_key('stable_swap', StableSwapDBKey.for_target_tok_bal(ADDR.data))
    assert info.kind == C.IDX_STATE_MAP
    assert info.name == 'TARGET_TOKEN_BALANCE'
    assert info.sub_key == de.Addr(ADDR)
    info = describe_db_key('stable_swap', StableSwapDBKey.for_price_target(ORDER_ID).data)
    assert info.name == 'PRICE_TARGET'
    assert info.sub_key.to_str() == ORDER_ID
    info = describe_db_key('lock', LockDBKey.for_ctrt_bal(ADDR.data))
    assert info.name == 'CONTRACT_BALANCE'


def test_describe_db_key_error():
    with pytest.raises(MalformedValue):
        describe_db_key('stable_swap', b'')
    with pytest.raises(UnknownIndexCode):
        describe_db_key('stable_swap', b'\x06')
    with pytest.raises(UnknownIndexCode):
        describe_db_key('stable_swap', b'\x0f\x0b\x00\x01\x01')
    with pytest.raises(MalformedValue):
        describe_db_key('stable_swap', b'\x03\x0b\x00\x05\x01')
    with pytest.raises(MalformedValue):
        describe_db_key('stable_swap', b'\x03\x63')
    with pytest.raises(UnsupportedContractType):
        describe_db_key('sys', b'\x00')


# testnet address and its raw bytes, decoded outside this library
FIXTURE_ADDR = 'AU8h6YH5iJuwFzcUdGugUwKo2E8tbEHdtqu'
FIXTURE_ADDR_HEX = '0554b6f35996418ec23a20ae6d887b5dd3ca1943c0926e09fa00'
FIXTURE_CTRT_ID = 'CF4H5byzrrL7unvTh5Db8gdKPeUgXyjJFBq'
FIXTURE_CTRT_ID_HEX = '065480c783bc383a122b9e833de989abdfe29ec5277bec91d0b4'


def test_base_tok_bal_key_fixture():
    key = StableSwapDBKey.for_base_tok_bal(FIXTURE_ADDR)
    assert key.data == bytes.fromhex('0002' + FIXTURE_ADDR_HEX)
    assert StableSwapDBKey.for_user_orders(FIXTURE_ADDR).data.hex() == '0202' + FIXTURE_ADDR_HEX


def test_list_keys():
    """user and contract entries of the same list never share a key"""
    user_key = TokV2DBKey.for_is_user_in_list(FIXTURE_ADDR)
    ctrt_key = TokV2DBKey.for_is_ctrt_in_list(FIXTURE_CTRT_ID)
    assert user_key.data == bytes.fromhex('0002' + FIXTURE_ADDR_HEX)
    assert ctrt_key.data == bytes.fromhex('0006' + FIXTURE_CTRT_ID_HEX)
    assert user_key != ctrt_key
    assert TokV2DBKey.for_regulator().data == b'\x02'
    assert TokV2DBKey.for_issuer().data == b'\x00'
    assert NFTV2DBKey.for_is_user_in_list(FIXTURE_ADDR).data == user_key.data
    assert NFTV2DBKey.for_is_ctrt_in_list(FIXTURE_CTRT_ID).data == ctrt_key.data
    assert NFTV2DBKey.for_regulator().data == b'\x02'
    with pytest.raises(InvalidFormat):
        TokV2DBKey.for_is_ctrt_in_list(FIXTURE_ADDR)
    with pytest.raises(InvalidFormat):
        TokV2DBKey.for_is_user_in_list(FIXTURE_CTRT_ID)
    info = describe_db_key('tok_v2_blacklist', ctrt_key)
    assert info.name == 'IS_IN_LIST'
    assert info.sub_key == de.CtrtAcnt(md.CtrtID(FIXTURE_CTRT_ID))


def test_list_keys_distinctness():
    keys = [
        TokV2DBKey.for_regulator(),
        TokV2DBKey.for_maker(),
        TokV2DBKey.for_is_user_in_list(FIXTURE_ADDR),
        TokV2DBKey.for_is_user_in_list(ADDR.data),
        TokV2DBKey.for_is_ctrt_in_list(FIXTURE_CTRT_ID),
    ]
    for a, b in combinations(keys, 2):
        assert a.data != b.data


def test_atomic_swap_and_pay_chan_keys():
    assert AtomicSwapDBKey.for_tok_id().data == b'\x01'
    assert AtomicSwapDBKey.for_ctrt_bal(FIXTURE_ADDR).data.hex() == '0002' + FIXTURE_ADDR_HEX
    assert AtomicSwapDBKey.for_swap_puzzle('2').data == b'\x03\x0b\x00\x01\x01'
    assert AtomicSwapDBKey.for_swap_status('2').data == b'\x06\x0b\x00\x01\x01'
    assert PayChanDBKey.for_chan_creator_pub_key('2').data == b'\x02\x0b\x00\x01\x01'
    assert PayChanDBKey.for_chan_status('2').data == b'\x07\x0b\x00\x01\x01'
    with pytest.raises(InvalidFormat):
        PayChanDBKey.for_chan_recipient('0OIl')


def test_escrow_and_option_keys():
    assert VEscrowDBKey.for_judge_duration().data == b'\x04'
    assert VEscrowDBKey.for_order_status('2').data == b'\x0b\x0b\x00\x01\x01'
    assert VEscrowDBKey.for_order_judge_locked_amount('2').data == b'\x11\x0b\x00\x01\x01'
    assert VOptionDBKey.for_option_status().data == b'\x07'
    assert VOptionDBKey.for_execute_deadline().data == b'\x06'
    assert VOptionDBKey.for_tok_collected().data == b'\x0e'
    assert VOptionDBKey.for_proof_tok_bal(FIXTURE_ADDR).data.hex() == '0302' + FIXTURE_ADDR_HEX
