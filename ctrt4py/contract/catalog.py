from ctrt4py.config import C, CatalogDefinitionError, UnknownIndexName, UnknownIndexCode
from typing import NamedTuple, Iterable, Tuple
from struct import Struct


class IndexEntry(NamedTuple):
    kind: str  # FuncIdx, StateVar or StateMapIdx
    ctrt_type: str
    name: str
    code: int

    def serialize(self) -> bytes:
        return Struct(C.idx_kind2format[self.kind]).pack(self.code)


class IndexCatalog(object):
    """
    immutable table of (name, code) for one index kind of one contract type
    code is bound to the name forever, removing it breaks deployed contract state
    """
    __slots__ = ("kind", "ctrt_type", "_struct", "_by_name", "_by_code")

    def __init__(self, kind, ctrt_type, table: Iterable[Tuple[str, int]]):
        if kind not in C.idx_kind2format:
            raise CatalogDefinitionError('Unknown index kind {!r}'.format(kind))
        st = Struct(C.idx_kind2format[kind])
        max_code = 2 ** (8 * st.size) - 1
        by_name = dict()
        by_code = dict()
        for name, code in table:
            if not isinstance(code, int) or isinstance(code, bool) or not (0 <= code <= max_code):
                raise CatalogDefinitionError('{}.{} {} code is 0~{} but {!r}'
                                             .format(ctrt_type, kind, name, max_code, code))
            if name in by_name:
                raise CatalogDefinitionError('{}.{} duplicate name {}'.format(ctrt_type, kind, name))
            if code in by_code:
                raise CatalogDefinitionError('{}.{} duplicate code {} of {} and {}'
                                             .format(ctrt_type, kind, code, by_code[code].name, name))
            entry = IndexEntry(kind, ctrt_type, name, code)
            by_name[name] = entry
            by_code[code] = entry
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'ctrt_type', ctrt_type)
        object.__setattr__(self, '_struct', st)
        object.__setattr__(self, '_by_name', by_name)
        object.__setattr__(self, '_by_code', by_code)

    def __setattr__(self, key, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __repr__(self):
        return "<IndexCatalog {}.{} {}>".format(self.ctrt_type, self.kind, len(self))

    def __len__(self):
        return len(self._by_name)

    def __iter__(self):
        # ordered by code
        return iter(sorted(self._by_name.values(), key=lambda e: e.code))

    def __contains__(self, name):
        return isinstance(name, str) and name in self._by_name

    def __getitem__(self, name):
        return self.entry(name)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.entry(name)
        except UnknownIndexName:
            raise AttributeError('{}.{} has no {}'.format(self.ctrt_type, self.kind, name))

    def entry(self, name) -> IndexEntry:
        if not isinstance(name, str) or name not in self._by_name:
            raise UnknownIndexName('{}.{} has no name {!r}'.format(self.ctrt_type, self.kind, name))
        return self._by_name[name]

    def entry_of(self, code) -> IndexEntry:
        # True and 1.0 hash as 1
        if not isinstance(code, int) or isinstance(code, bool) or code not in self._by_code:
            raise UnknownIndexCode('{}.{} has no code {!r}'.format(self.ctrt_type, self.kind, code))
        return self._by_code[code]

    def index_of(self, name) -> int:
        return self.entry(name).code

    def name_of(self, code) -> str:
        return self.entry_of(code).name

    def serialize(self, code) -> bytes:
        return self.entry_of(code).serialize()

    @property
    def width(self):
        return self._struct.size

    def unpack_code(self, b):
        """leading code bytes of the serialized index"""
        return self._struct.unpack(b[:self._struct.size])[0]


__all__ = [
    "IndexEntry",
    "IndexCatalog",
]
