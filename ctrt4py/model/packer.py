from ctrt4py.config import MalformedValue
from struct import Struct, error as StructError

# all multi-byte integers are big endian on the ledger
struct_u8 = Struct('>B')
struct_i8 = Struct('>b')
struct_u16 = Struct('>H')
struct_u32 = Struct('>I')
struct_u64 = Struct('>Q')


def _pack(st, val):
    try:
        return st.pack(val)
    except StructError as e:
        raise ValueError('Cannot pack {!r} into {} bytes: {}'.format(val, st.size, e))


def _unpack(st, b):
    if len(b) != st.size:
        raise MalformedValue('Expect {} bytes but {} bytes'.format(st.size, len(b)))
    return st.unpack(b)[0]


def pack_u8(val):
    return _pack(struct_u8, val)


def pack_i8(val):
    return _pack(struct_i8, val)


def pack_u16(val):
    return _pack(struct_u16, val)


def pack_u32(val):
    return _pack(struct_u32, val)


def pack_u64(val):
    return _pack(struct_u64, val)


def pack_bool(val):
    return pack_u8(1 if val else 0)


def unpack_u8(b):
    return _unpack(struct_u8, b)


def unpack_u16(b):
    return _unpack(struct_u16, b)


def unpack_u32(b):
    return _unpack(struct_u32, b)


def unpack_u64(b):
    return _unpack(struct_u64, b)


def unpack_bool(b):
    i = unpack_u8(b)
    if i not in (0, 1):
        raise MalformedValue('Bool byte is 0 or 1 but {}'.format(i))
    return i == 1


__all__ = [
    "pack_u8",
    "pack_i8",
    "pack_u16",
    "pack_u32",
    "pack_u64",
    "pack_bool",
    "unpack_u8",
    "unpack_u16",
    "unpack_u32",
    "unpack_u64",
    "unpack_bool",
]
