"""
value models
====
containers for the values stored in contract state, validated on creation.
text forms (base58 or decimal) are used at api boundaries, raw bytes on the wire.
"""

from ctrt4py.config import C, InvalidFormat
from ctrt4py.chain import ChainID
from ctrt4py.model.base58 import b58encode, b58decode
from ctrt4py.model.hashes import secure_hash
from ctrt4py.model.packer import pack_i8, pack_u32, unpack_u32
from decimal import Decimal, InvalidOperation
from time import time
import re

MAX_U32 = 2 ** 32 - 1
MAX_U64 = 2 ** 64 - 1
INT_STR_RE = re.compile(r'\A(0|[1-9][0-9]*)\Z')


class Model(object):
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data
        self.validate()

    def __eq__(self, other):
        return type(self) is type(other) and self.data == other.data

    def __hash__(self):
        return hash((type(self).__name__, self.data))

    def __repr__(self):
        return "<{} {!r}>".format(type(self).__name__, self.data)

    def validate(self):
        pass


class Bytes(Model):
    __slots__ = tuple()

    def __init__(self, data=b''):
        super().__init__(data)

    def __len__(self):
        return len(self.data)

    @property
    def b58_str(self):
        return b58encode(self.data)

    def validate(self):
        if not isinstance(self.data, bytes):
            raise InvalidFormat('Data in {} must be bytes'.format(type(self).__name__))

    @classmethod
    def from_b58_str(cls, s):
        return cls(b58decode(s))

    @classmethod
    def from_str(cls, s):
        try:
            return cls(s.encode('latin1'))
        except (UnicodeEncodeError, AttributeError):
            raise InvalidFormat('Not latin1 string {!r}'.format(s))


class Str(Model):
    __slots__ = tuple()

    def __init__(self, data=''):
        super().__init__(data)

    @property
    def bytes(self):
        return self.data.encode('latin1')

    @property
    def b58_str(self):
        return b58encode(self.bytes)

    def validate(self):
        if not isinstance(self.data, str):
            raise InvalidFormat('Data in {} must be str'.format(type(self).__name__))
        try:
            self.data.encode('latin1')
        except UnicodeEncodeError:
            raise InvalidFormat('Data in {} must be latin1 encodable'.format(type(self).__name__))

    @classmethod
    def from_bytes(cls, b):
        return cls(b.decode('latin1'))


class B58Str(Str):
    __slots__ = tuple()

    @property
    def bytes(self):
        return b58decode(self.data)

    def validate(self):
        if not isinstance(self.data, str):
            raise InvalidFormat('Data in {} must be str'.format(type(self).__name__))
        self.bytes  # raise InvalidFormat if not base58

    @classmethod
    def from_bytes(cls, b):
        return cls(b58encode(b))


class FixedSizeB58Str(B58Str):
    __slots__ = tuple()
    BYTES_LEN = 0

    def validate(self):
        super().validate()
        size = len(self.bytes)
        if size != self.BYTES_LEN:
            raise InvalidFormat('Data in {} must be exactly {} bytes after base58 decode but {}'
                                .format(type(self).__name__, self.BYTES_LEN, size))


class TxID(FixedSizeB58Str):
    __slots__ = tuple()
    BYTES_LEN = 32


class PubKey(FixedSizeB58Str):
    __slots__ = tuple()
    BYTES_LEN = 32


class Addr(FixedSizeB58Str):
    __slots__ = tuple()
    BYTES_LEN = C.ADDR_BYTES_LEN

    @property
    def version(self):
        return self.bytes[0]

    @property
    def chain_id(self):
        return ChainID.from_str(chr(self.bytes[1]))

    @property
    def pub_key_hash(self):
        return self.bytes[2:2 + C.PUBKEY_HASH_LEN]

    @property
    def checksum(self):
        return self.bytes[-C.CHECKSUM_LEN:]

    def validate(self):
        super().validate()
        if self.version != C.ADDR_VERSION:
            raise InvalidFormat('Addr version is {} but {}'.format(C.ADDR_VERSION, self.version))
        self.chain_id  # raise InvalidFormat if unknown chain
        expected = secure_hash(self.bytes[:-C.CHECKSUM_LEN])[:C.CHECKSUM_LEN]
        if self.checksum != expected:
            raise InvalidFormat('Addr has invalid checksum {}'.format(self.data))

    def must_on(self, chain_id):
        if self.chain_id is not chain_id:
            raise InvalidFormat('Addr is on chain {} but expect {}'.format(self.chain_id.value, chain_id.value))

    @classmethod
    def from_pub_key(cls, pub_key, chain_id):
        raw = bytes([C.ADDR_VERSION]) + chain_id.to_byte() + \
            secure_hash(pub_key.bytes)[:C.PUBKEY_HASH_LEN]
        checksum = secure_hash(raw)[:C.CHECKSUM_LEN]
        return cls.from_bytes(raw + checksum)


class CtrtID(FixedSizeB58Str):
    __slots__ = tuple()
    BYTES_LEN = C.CTRT_ID_BYTES_LEN

    @property
    def version(self):
        return self.bytes[0]

    def validate(self):
        super().validate()
        # an address has the same length
        if self.version != C.CTRT_ADDR_VER:
            raise InvalidFormat('CtrtID version is {} but {}'.format(C.CTRT_ADDR_VER, self.version))

    def get_tok_id(self, tok_idx):
        """token ID of the token contract with the token index"""
        TokenIdx(tok_idx)  # for validation
        b = self.bytes
        raw_ctrt_id = b[1:len(b) - C.CHECKSUM_LEN]
        tok_id_no_checksum = pack_i8(C.TOKEN_ADDR_VER) + raw_ctrt_id + pack_u32(tok_idx)
        h = secure_hash(tok_id_no_checksum)
        return TokenID.from_bytes(tok_id_no_checksum + h[:C.CHECKSUM_LEN])


class TokenID(FixedSizeB58Str):
    __slots__ = tuple()
    BYTES_LEN = C.TOKEN_ID_BYTES_LEN

    @property
    def is_vsys_tok(self):
        return self.data in (C.MAINNET_VSYS_TOK_ID, C.TESTNET_VSYS_TOK_ID)

    @property
    def tok_idx(self):
        b = self.bytes[:-C.CHECKSUM_LEN]
        return TokenIdx(unpack_u32(b[-C.TOKEN_IDX_BYTES_LEN:]))

    def get_ctrt_id(self):
        b = self.bytes
        raw_ctrt_id = b[1:len(b) - C.TOKEN_IDX_BYTES_LEN - C.CHECKSUM_LEN]
        ctrt_id_no_checksum = pack_i8(C.CTRT_ADDR_VER) + raw_ctrt_id
        h = secure_hash(ctrt_id_no_checksum)
        return CtrtID.from_bytes(ctrt_id_no_checksum + h[:C.CHECKSUM_LEN])


class Int(Model):
    __slots__ = tuple()
    MIN = None
    MAX = None

    def __init__(self, data=0):
        super().__init__(data)

    def validate(self):
        if not isinstance(self.data, int) or isinstance(self.data, bool):
            raise InvalidFormat('Data in {} must be int'.format(type(self).__name__))
        if self.MIN is not None and self.data < self.MIN:
            raise InvalidFormat('Data in {} must be >= {} but {}'.format(type(self).__name__, self.MIN, self.data))
        if self.MAX is not None and self.MAX < self.data:
            raise InvalidFormat('Data in {} must be <= {} but {}'.format(type(self).__name__, self.MAX, self.data))

    @classmethod
    def from_str(cls, s):
        # canonical decimal only, no sign, padding or underscore
        if not isinstance(s, str) or not INT_STR_RE.match(s):
            raise InvalidFormat('Not integer string {!r}'.format(s))
        return cls(int(s))


class NonNegativeInt(Int):
    __slots__ = tuple()
    MIN = 0


class UInt32(NonNegativeInt):
    __slots__ = tuple()
    MAX = MAX_U32


class TokenIdx(UInt32):
    __slots__ = tuple()


class Long(NonNegativeInt):
    """unsigned 8bytes integer"""
    __slots__ = tuple()
    MAX = MAX_U64


class VSYSTimestamp(Long):
    __slots__ = tuple()
    SCALE = C.TIMESTAMP_SCALE

    @property
    def unix_ts(self):
        """unix timestamp in milliseconds"""
        return self.data // self.SCALE

    def validate(self):
        super().validate()
        if self.data != 0 and self.data < self.SCALE:
            raise InvalidFormat('Data in {} must either be 0 or equal or greater than {}'
                                .format(type(self).__name__, self.SCALE))

    @classmethod
    def now(cls):
        return cls(int(time() * 1000) * cls.SCALE)

    @classmethod
    def from_unix_ts(cls, ux_ts):
        """from unix timestamp in milliseconds"""
        if not isinstance(ux_ts, int):
            raise InvalidFormat('unix timestamp is int milliseconds but {!r}'.format(ux_ts))
        return cls(ux_ts * cls.SCALE)


def _scale_amount(cls, amount, unit):
    try:
        data = Decimal(str(amount)) * unit
    except InvalidOperation:
        raise InvalidFormat('Not number {!r}'.format(amount))
    if data != data.to_integral_value():
        raise InvalidFormat('Invalid amount for {}: {}. The minimal valid amount granularity is 1/{}'
                            .format(cls.__name__, amount, unit))
    return int(data)


class Token(Long):
    """token amount with unit, data is the raw integer on the ledger"""
    __slots__ = ("unit",)

    def __init__(self, data=0, unit=1):
        self.unit = unit
        super().__init__(data)

    def __eq__(self, other):
        return super().__eq__(other) and self.unit == other.unit

    def __hash__(self):
        return hash((type(self).__name__, self.data, self.unit))

    def __repr__(self):
        return "<Token {} unit={}>".format(self.data, self.unit)

    @property
    def amount(self):
        return Decimal(self.data) / self.unit

    @classmethod
    def for_amount(cls, amount, unit):
        return cls(_scale_amount(cls, amount, unit), unit)


class VSYS(Long):
    __slots__ = tuple()
    UNIT = C.VSYS_UNIT

    @property
    def amount(self):
        return Decimal(self.data) / self.UNIT

    @classmethod
    def for_amount(cls, amount):
        return cls(_scale_amount(cls, amount, cls.UNIT))


class Fee(VSYS):
    __slots__ = tuple()
    DEFAULT = C.DEFAULT_FEE

    def validate(self):
        super().validate()
        if self.data < self.DEFAULT:
            raise InvalidFormat('Data in {} must be equal or greater than {}'
                                .format(type(self).__name__, self.DEFAULT))

    @classmethod
    def default(cls):
        return cls(cls.DEFAULT)


class ExecCtrtFee(Fee):
    __slots__ = tuple()
    DEFAULT = C.EXEC_CTRT_FEE


class RegCtrtFee(Fee):
    __slots__ = tuple()
    DEFAULT = C.REG_CTRT_FEE


class Bool(Model):
    __slots__ = tuple()

    def __init__(self, data=False):
        super().__init__(data)

    def validate(self):
        if not isinstance(self.data, bool):
            raise InvalidFormat('Data in {} must be bool'.format(type(self).__name__))

    @classmethod
    def from_str(cls, s):
        if s == 'true':
            return cls(True)
        elif s == 'false':
            return cls(False)
        raise InvalidFormat('Bool text is "true" or "false" but {!r}'.format(s))


__all__ = [
    "Model",
    "Bytes",
    "Str",
    "B58Str",
    "FixedSizeB58Str",
    "TxID",
    "PubKey",
    "Addr",
    "CtrtID",
    "TokenID",
    "Int",
    "NonNegativeInt",
    "UInt32",
    "TokenIdx",
    "Long",
    "VSYSTimestamp",
    "Token",
    "VSYS",
    "Fee",
    "ExecCtrtFee",
    "RegCtrtFee",
    "Bool",
]
