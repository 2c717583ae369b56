"""
data entry
====
typed values on the ledger, serialized as [tag 1byte]-[payload].
fixed size payloads have no length, text payloads have [length 2bytes] before.
"""

from ctrt4py.config import C, InvalidFormat, MalformedValue
from ctrt4py.model import models as md
from ctrt4py.model.packer import *
from logging import getLogger

log = getLogger('ctrt4py')


class DataEntry(object):
    __slots__ = ("data",)
    IDX = 0
    MODEL = md.Model
    NODE_TYPE = None

    def __init__(self, data):
        if not isinstance(data, self.MODEL):
            raise TypeError('{} contains {} but {!r}'.format(type(self).__name__, self.MODEL.__name__, data))
        self.data = data

    def __eq__(self, other):
        # equal when the encoding is equal
        return type(self) is type(other) and self.serialize() == other.serialize()

    def __hash__(self):
        return hash(self.serialize())

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self.to_str())

    @property
    def idx_bytes(self):
        return pack_u8(self.IDX)

    @property
    def bytes(self):
        raise NotImplementedError

    def serialize(self):
        return self.idx_bytes + self.bytes

    def to_str(self):
        raise NotImplementedError

    @classmethod
    def _payload2model(cls, b):
        raise NotImplementedError

    @classmethod
    def _text2model(cls, s):
        raise NotImplementedError

    @classmethod
    def _read_payload(cls, b, pos):
        """return (payload, next_pos), pos is just after the tag"""
        raise NotImplementedError

    @classmethod
    def from_bytes(cls, b):
        """payload only (no tag and no length) to data entry"""
        try:
            return cls(cls._payload2model(b))
        except InvalidFormat as e:
            raise MalformedValue('Malformed {} payload: {}'.format(cls.__name__, e))

    @classmethod
    def from_str(cls, s):
        """text form at api boundary to data entry, raise InvalidFormat"""
        return cls(cls._text2model(s))

    @classmethod
    def from_node_value(cls, value):
        if isinstance(value, str):
            return cls.from_str(value)
        return cls(cls.MODEL(value))

    @classmethod
    def read_from(cls, b, pos=0):
        """read one serialized entry from pos, return (entry, next_pos)"""
        if len(b) <= pos:
            raise MalformedValue('Not found {} tag, empty bytes'.format(cls.__name__))
        if b[pos] != cls.IDX:
            raise MalformedValue('{} tag is {} but {}'.format(cls.__name__, cls.IDX, b[pos]))
        payload, next_pos = cls._read_payload(b, pos + 1)
        return cls.from_bytes(payload), next_pos

    @classmethod
    def deserialize(cls, b):
        entry, pos = cls.read_from(b, 0)
        if pos != len(b):
            raise MalformedValue('{} has {} trailing bytes'.format(cls.__name__, len(b) - pos))
        return entry


class FixedSizeEntry(DataEntry):
    __slots__ = tuple()
    SIZE = 0

    @classmethod
    def _read_payload(cls, b, pos):
        if len(b) < pos + cls.SIZE:
            raise MalformedValue('{} payload is {} bytes but {} bytes left'
                                 .format(cls.__name__, cls.SIZE, len(b) - pos))
        return b[pos:pos + cls.SIZE], pos + cls.SIZE

    @classmethod
    def from_bytes(cls, b):
        if len(b) != cls.SIZE:
            raise MalformedValue('{} payload is {} bytes but {} bytes'.format(cls.__name__, cls.SIZE, len(b)))
        return super().from_bytes(b)


class FixedSizeB58Str(FixedSizeEntry):
    __slots__ = tuple()
    MODEL = md.FixedSizeB58Str

    @property
    def bytes(self):
        return self.data.bytes

    def to_str(self):
        return self.data.data

    @classmethod
    def _payload2model(cls, b):
        return cls.MODEL.from_bytes(b)

    @classmethod
    def _text2model(cls, s):
        return cls.MODEL(s)


class Long(FixedSizeEntry):
    __slots__ = tuple()
    MODEL = md.Long
    SIZE = 8

    @property
    def bytes(self):
        return pack_u64(self.data.data)

    def to_str(self):
        return str(self.data.data)

    @classmethod
    def _payload2model(cls, b):
        return cls.MODEL(unpack_u64(b))

    @classmethod
    def _text2model(cls, s):
        return cls.MODEL.from_str(s)


class Text(DataEntry):
    __slots__ = tuple()

    @property
    def len_bytes(self):
        return pack_u16(len(self.bytes))

    def serialize(self):
        return self.idx_bytes + self.len_bytes + self.bytes

    @classmethod
    def _read_payload(cls, b, pos):
        if len(b) < pos + 2:
            raise MalformedValue('{} length is 2 bytes but {} bytes left'.format(cls.__name__, len(b) - pos))
        length = unpack_u16(b[pos:pos + 2])
        pos += 2
        if len(b) < pos + length:
            raise MalformedValue('{} payload is {} bytes but {} bytes left'
                                 .format(cls.__name__, length, len(b) - pos))
        return b[pos:pos + length], pos + length


# Concrete data entry classes are listed below.
# By the order of their indexes

class PubKey(FixedSizeB58Str):
    __slots__ = tuple()
    MODEL = md.PubKey
    IDX = C.DE_PUB_KEY
    SIZE = 32
    NODE_TYPE = 'PublicKey'


class Addr(FixedSizeB58Str):
    __slots__ = tuple()
    MODEL = md.Addr
    IDX = C.DE_ADDR
    SIZE = C.ADDR_BYTES_LEN
    NODE_TYPE = 'Address'


class Amount(Long):
    __slots__ = tuple()
    IDX = C.DE_AMOUNT
    NODE_TYPE = 'Amount'

    @classmethod
    def for_vsys_amount(cls, amount):
        return cls(md.VSYS.for_amount(amount))

    @classmethod
    def for_tok_amount(cls, amount, unit):
        return cls(md.Token.for_amount(amount, unit))


class Int32(FixedSizeEntry):
    __slots__ = tuple()
    MODEL = md.UInt32
    IDX = C.DE_INT32
    SIZE = 4
    NODE_TYPE = 'Int32'

    @property
    def bytes(self):
        return pack_u32(self.data.data)

    def to_str(self):
        return str(self.data.data)

    @classmethod
    def _payload2model(cls, b):
        return md.UInt32(unpack_u32(b))

    @classmethod
    def _text2model(cls, s):
        return md.UInt32.from_str(s)


class Str(Text):
    __slots__ = tuple()
    MODEL = md.Str
    IDX = C.DE_STR
    NODE_TYPE = 'ShortText'

    @property
    def bytes(self):
        return self.data.bytes

    def to_str(self):
        return self.data.data

    @classmethod
    def _payload2model(cls, b):
        return md.Str.from_bytes(b)

    @classmethod
    def _text2model(cls, s):
        return md.Str(s)


class CtrtAcnt(FixedSizeB58Str):
    __slots__ = tuple()
    MODEL = md.CtrtID
    IDX = C.DE_CTRT_ACNT
    SIZE = C.CTRT_ID_BYTES_LEN
    NODE_TYPE = 'ContractAccount'


class Acnt(FixedSizeB58Str):
    __slots__ = tuple()
    MODEL = md.Addr
    IDX = C.DE_ACNT
    SIZE = C.ADDR_BYTES_LEN
    NODE_TYPE = 'Account'


class TokenID(FixedSizeB58Str):
    __slots__ = tuple()
    MODEL = md.TokenID
    IDX = C.DE_TOKEN_ID
    SIZE = C.TOKEN_ID_BYTES_LEN
    NODE_TYPE = 'TokenId'


class Timestamp(Long):
    __slots__ = tuple()
    MODEL = md.VSYSTimestamp
    IDX = C.DE_TIMESTAMP
    NODE_TYPE = 'Timestamp'

    @classmethod
    def now(cls):
        return cls(md.VSYSTimestamp.now())

    @classmethod
    def from_unix_ts(cls, ux_ts):
        return cls(md.VSYSTimestamp.from_unix_ts(ux_ts))


class Bool(FixedSizeEntry):
    __slots__ = tuple()
    MODEL = md.Bool
    IDX = C.DE_BOOL
    SIZE = 1
    NODE_TYPE = 'Boolean'

    @property
    def bytes(self):
        return pack_bool(self.data.data)

    def to_str(self):
        return 'true' if self.data.data else 'false'

    @classmethod
    def _payload2model(cls, b):
        try:
            return md.Bool(unpack_bool(b))
        except MalformedValue as e:
            raise InvalidFormat(str(e))

    @classmethod
    def _text2model(cls, s):
        return md.Bool.from_str(s)


class Bytes(Text):
    """opaque bytes, base58 is the text form"""
    __slots__ = tuple()
    MODEL = md.Bytes
    IDX = C.DE_BYTES
    NODE_TYPE = 'ShortBytes'

    @property
    def bytes(self):
        return self.data.data

    def to_str(self):
        return self.data.b58_str

    @classmethod
    def _payload2model(cls, b):
        return md.Bytes(b)

    @classmethod
    def _text2model(cls, s):
        return md.Bytes.from_b58_str(s)

    @classmethod
    def from_latin1_str(cls, s):
        return cls(md.Bytes.from_str(s))


class Balance(Long):
    __slots__ = tuple()
    IDX = C.DE_BALANCE
    NODE_TYPE = 'Balance'


ENTRY_CLASSES = (PubKey, Addr, Amount, Int32, Str, CtrtAcnt, Acnt, TokenID, Timestamp, Bool, Bytes, Balance)
INDEX_MAP = {cls.IDX: cls for cls in ENTRY_CLASSES}
NODE_TYPE_MAP = {cls.NODE_TYPE: cls for cls in ENTRY_CLASSES}


def from_node_value(node_type, value):
    """typed value from node json {"type": .., "value": ..}"""
    cls = NODE_TYPE_MAP.get(node_type)
    if cls is None:
        raise MalformedValue('Unknown data entry type {!r}'.format(node_type))
    return cls.from_node_value(value)


class DataStack(object):
    __slots__ = ("entries",)

    def __init__(self, *entries):
        self.entries = list(entries)

    def __eq__(self, other):
        return isinstance(other, DataStack) and self.entries == other.entries

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __repr__(self):
        return "<DataStack {}>".format(self.entries)

    def serialize(self):
        # [entries_len H]-[entry]-[entry]-..
        return pack_u16(len(self.entries)) + b''.join(de.serialize() for de in self.entries)

    @classmethod
    def deserialize(cls, b):
        if len(b) < 2:
            raise MalformedValue('DataStack count is 2 bytes but {} bytes'.format(len(b)))
        count = unpack_u16(b[:2])
        pos = 2
        entries = list()
        for _ in range(count):
            if len(b) <= pos:
                raise MalformedValue('DataStack expect {} entries but {}'.format(count, len(entries)))
            de_cls = INDEX_MAP.get(b[pos])
            if de_cls is None:
                raise MalformedValue('Unknown data entry tag {}'.format(b[pos]))
            de, pos = de_cls.read_from(b, pos)
            entries.append(de)
        if pos != len(b):
            raise MalformedValue('DataStack has {} trailing bytes'.format(len(b) - pos))
        log.debug("deserialize DataStack of {} entries".format(count))
        return cls(*entries)


__all__ = [
    "DataEntry",
    "PubKey",
    "Addr",
    "Amount",
    "Int32",
    "Str",
    "CtrtAcnt",
    "Acnt",
    "TokenID",
    "Timestamp",
    "Bool",
    "Bytes",
    "Balance",
    "INDEX_MAP",
    "NODE_TYPE_MAP",
    "from_node_value",
    "DataStack",
]
