from ctrt4py.config import InvalidFormat, MalformedValue
from ctrt4py.chain import ChainID
from ctrt4py.model import models as md
from ctrt4py.model.hashes import secure_hash
from ctrt4py import data_entry as de
from decimal import Decimal
import pytest


PUB_KEY = md.PubKey.from_bytes(b'\x01' * 32)
ADDR = md.Addr.from_pub_key(PUB_KEY, ChainID.TEST_NET)
_RAW_CTRT_ID = bytes([6]) + b'\x02' * 21
CTRT_ID = md.CtrtID.from_bytes(_RAW_CTRT_ID + secure_hash(_RAW_CTRT_ID)[:4])
TOK_ID = CTRT_ID.get_tok_id(0)

ENTRIES = [
    de.PubKey(PUB_KEY),
    de.Addr(ADDR),
    de.Amount(md.Long(0)),
    de.Amount(md.Long(2 ** 64 - 1)),
    de.Int32(md.UInt32(0)),
    de.Int32(md.UInt32(2 ** 32 - 1)),
    de.Str(md.Str('')),
    de.Str(md.Str('vsys ctrt \xff')),
    de.CtrtAcnt(CTRT_ID),
    de.Acnt(ADDR),
    de.TokenID(TOK_ID),
    de.Timestamp(md.VSYSTimestamp(0)),
    de.Timestamp(md.VSYSTimestamp(2 ** 64 - 1)),
    de.Bool(md.Bool(True)),
    de.Bool(md.Bool(False)),
    de.Bytes(md.Bytes(b'')),
    de.Bytes(md.Bytes(b'\xff' * 300)),
    de.Balance(md.Long(0)),
    de.Balance(md.Long(2 ** 64 - 1)),
]


@pytest.mark.parametrize('entry', ENTRIES, ids=repr)
def test_encode_decode(entry):
    """decode(encode(v)) == v"""
    b = entry.serialize()
    assert b[0] == entry.IDX
    assert type(entry).deserialize(b) == entry


@pytest.mark.parametrize('entry', ENTRIES, ids=repr)
def test_format_parse(entry):
    """parse(format(v)) == v"""
    assert type(entry).from_str(entry.to_str()) == entry


def test_fixed_layout():
    assert de.Amount(md.Long(1)).serialize() == b'\x03' + b'\x00' * 7 + b'\x01'
    assert de.Int32(md.UInt32(258)).serialize() == b'\x04\x00\x00\x01\x02'
    assert de.Timestamp.from_unix_ts(1).serialize() == b'\x09' + (10 ** 6).to_bytes(8, 'big')
    assert de.Bool(md.Bool(True)).serialize() == b'\x0a\x01'
    assert de.Bool(md.Bool(False)).serialize() == b'\x0a\x00'
    assert de.Addr(ADDR).serialize() == b'\x02' + ADDR.bytes
    assert de.Acnt(ADDR).serialize() == b'\x07' + ADDR.bytes
    assert len(de.TokenID(TOK_ID).serialize()) == 31


def test_text_layout():
    assert de.Str(md.Str('ab')).serialize() == b'\x05\x00\x02ab'
    assert de.Bytes(md.Bytes(b'\x01\x02')).serialize() == b'\x0b\x00\x02\x01\x02'
    big = de.Bytes(md.Bytes(b'\x00' * 65535))
    assert big.serialize()[:3] == b'\x0b\xff\xff'
    with pytest.raises(ValueError):
        de.Bytes(md.Bytes(b'\x00' * 65536)).serialize()


def test_bytes_text_form():
    # '1' is one zero byte in base58
    assert de.Bytes.from_str('1').bytes == b'\x00'
    assert de.Bytes.from_str('2').to_str() == '2'
    assert de.Bytes.from_latin1_str('ab').bytes == b'ab'


def test_wrong_tag():
    with pytest.raises(MalformedValue):
        de.Amount.deserialize(b'\x04' + b'\x00' * 8)
    with pytest.raises(MalformedValue):
        de.Addr.deserialize(de.Acnt(ADDR).serialize())


def test_truncated():
    with pytest.raises(MalformedValue):
        de.Amount.deserialize(b'\x03\x00')
    with pytest.raises(MalformedValue):
        de.Str.deserialize(b'\x05\x00\x05ab')
    with pytest.raises(MalformedValue):
        de.Str.deserialize(b'\x05\x00')
    with pytest.raises(MalformedValue):
        de.Bool.deserialize(b'')


def test_trailing_bytes():
    with pytest.raises(MalformedValue):
        de.Bool.deserialize(b'\x0a\x01\x00')
    with pytest.raises(MalformedValue):
        de.Bytes.deserialize(b'\x0b\x00\x01\x01\x01')


def test_malformed_payload():
    with pytest.raises(MalformedValue):
        de.Bool.deserialize(b'\x0a\x02')
    bad = ADDR.bytes[:-1] + bytes([ADDR.bytes[-1] ^ 1])
    with pytest.raises(MalformedValue):
        de.Addr.deserialize(b'\x02' + bad)
    with pytest.raises(MalformedValue):
        de.Addr.from_bytes(ADDR.bytes[:-1])


def test_invalid_text():
    with pytest.raises(InvalidFormat):
        de.Addr.from_str('0OIl')
    with pytest.raises(InvalidFormat):
        de.Addr.from_str(PUB_KEY.data)
    with pytest.raises(InvalidFormat):
        de.Bytes.from_str('0OIl')
    with pytest.raises(InvalidFormat):
        de.Int32.from_str('abc')
    with pytest.raises(InvalidFormat):
        de.Int32.from_str(str(2 ** 32))
    with pytest.raises(InvalidFormat):
        de.Amount.from_str('-1')
    with pytest.raises(InvalidFormat):
        de.Bool.from_str('yes')
    with pytest.raises(InvalidFormat):
        de.Str.from_str('日本')
    with pytest.raises(InvalidFormat):
        de.Bytes.from_str('2 \n')


@pytest.mark.parametrize('text', [' 12 ', '12\n', '1_2', '+12', '012', '-0', '١٢', '', 1.9, 12])
def test_int_text_not_canonical(text):
    """integer text is plain ascii decimal, nothing is coerced"""
    with pytest.raises(InvalidFormat):
        de.Amount.from_str(text)
    with pytest.raises(InvalidFormat):
        de.Int32.from_str(text)


def test_int_text_canonical():
    assert de.Amount.from_str('0') == de.Amount(md.Long(0))
    assert de.Int32.from_str('12') == de.Int32(md.UInt32(12))
    assert de.Balance.from_str(str(2 ** 64 - 1)).data.data == 2 ** 64 - 1


def test_entry_type_check():
    with pytest.raises(TypeError):
        de.Addr(PUB_KEY)
    with pytest.raises(TypeError):
        de.Int32(md.Long(1))


def test_amount_for_tok_amount():
    amount = de.Amount.for_tok_amount(1.5, 100)
    assert amount == de.Amount(md.Long(150))
    assert amount.data.amount == Decimal('1.5')
    assert de.Amount.for_vsys_amount(1).data.data == 10 ** 8
    with pytest.raises(InvalidFormat):
        de.Amount.for_tok_amount(0.001, 100)


def test_data_stack():
    ds = de.DataStack(
        de.Bytes.from_str('2'),
        de.Amount(md.Long(5)),
        de.Timestamp.from_unix_ts(1600000000000),
        de.Addr(ADDR),
    )
    b = ds.serialize()
    assert b[:2] == b'\x00\x04'
    assert de.DataStack.deserialize(b) == ds
    assert len(de.DataStack.deserialize(b)) == 4
    assert de.DataStack().serialize() == b'\x00\x00'
    assert de.DataStack.deserialize(b'\x00\x00') == de.DataStack()


def test_data_stack_malformed():
    with pytest.raises(MalformedValue):
        de.DataStack.deserialize(b'\x00')
    with pytest.raises(MalformedValue):
        de.DataStack.deserialize(b'\x00\x01\x63')
    with pytest.raises(MalformedValue):
        de.DataStack.deserialize(b'\x00\x02' + de.Bool(md.Bool(True)).serialize())
    with pytest.raises(MalformedValue):
        de.DataStack.deserialize(de.DataStack(de.Bool(md.Bool(True))).serialize() + b'\x00')


def test_from_node_value():
    assert de.from_node_value('Address', ADDR.data) == de.Addr(ADDR)
    assert de.from_node_value('Amount', 100) == de.Amount(md.Long(100))
    assert de.from_node_value('Int32', 7) == de.Int32(md.UInt32(7))
    assert de.from_node_value('Boolean', 'true') == de.Bool(md.Bool(True))
    assert de.from_node_value('TokenId', TOK_ID.data) == de.TokenID(TOK_ID)
    with pytest.raises(MalformedValue):
        de.from_node_value('OpcBlock', '')


def test_index_map():
    assert sorted(de.INDEX_MAP) == list(range(1, 13))
    assert de.INDEX_MAP[11] is de.Bytes
