"""
db key
====
key of one slot in the contract state on the node.
state var: [StateVar 1byte]
state map: [StateMapIdx 1byte]-[sub key data entry]
"""

from ctrt4py.config import C, MalformedValue
from ctrt4py.contract.catalog import IndexEntry
from ctrt4py.contract.registry import catalog_for
from ctrt4py.data_entry import DataEntry, INDEX_MAP
from ctrt4py import data_entry as de
from ctrt4py.model.models import Bytes
from typing import NamedTuple, Optional


class StateMap(NamedTuple):
    idx: IndexEntry
    data_entry: DataEntry

    def serialize(self) -> bytes:
        return self.idx.serialize() + self.data_entry.serialize()


def build_map_key(idx, sub_key):
    if idx.kind != C.IDX_STATE_MAP:
        raise TypeError('map key index is StateMapIdx but {} {}'.format(idx.kind, idx.name))
    return StateMap(idx, sub_key).serialize()


class DBKey(Bytes):
    __slots__ = tuple()

    @classmethod
    def for_state_var(cls, sv):
        if sv.kind != C.IDX_STATE_VAR:
            raise TypeError('state var key index is StateVar but {} {}'.format(sv.kind, sv.name))
        return cls(sv.serialize())

    @classmethod
    def for_state_map(cls, idx, sub_key):
        return cls(build_map_key(idx, sub_key))

    @classmethod
    def for_addr_map(cls, idx, addr):
        """map keyed by account address text"""
        return cls.for_state_map(idx, de.Addr.from_str(addr))

    @classmethod
    def for_ctrt_acnt_map(cls, idx, ctrt_id):
        """map keyed by contract id text"""
        return cls.for_state_map(idx, de.CtrtAcnt.from_str(ctrt_id))

    @classmethod
    def for_b58_bytes_map(cls, idx, b58_str):
        """map keyed by opaque bytes in base58 text, ex. order id"""
        return cls.for_state_map(idx, de.Bytes.from_str(b58_str))


class DBKeyInfo(NamedTuple):
    kind: str
    name: str
    sub_key: Optional[DataEntry]


def describe_db_key(ctrt_type, db_key):
    """decode raw db key to (kind, name, sub_key) by the registered catalogs"""
    catalogs = catalog_for(ctrt_type)
    b = db_key.data if isinstance(db_key, Bytes) else db_key
    if len(b) == 0:
        raise MalformedValue('Empty db key')
    if len(b) == catalogs.state_var.width:
        code = catalogs.state_var.unpack_code(b)
        return DBKeyInfo(C.IDX_STATE_VAR, catalogs.state_var.name_of(code), None)
    width = catalogs.state_map.width
    if len(b) <= width:
        raise MalformedValue('db key is too short {}'.format(b.hex()))
    name = catalogs.state_map.name_of(catalogs.state_map.unpack_code(b))
    de_cls = INDEX_MAP.get(b[width])
    if de_cls is None:
        raise MalformedValue('Unknown sub key tag {} of {}'.format(b[width], name))
    return DBKeyInfo(C.IDX_STATE_MAP, name, de_cls.deserialize(b[width:]))


__all__ = [
    "StateMap",
    "build_map_key",
    "DBKey",
    "DBKeyInfo",
    "describe_db_key",
]
