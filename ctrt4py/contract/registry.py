from ctrt4py.config import C, CatalogDefinitionError, UnsupportedContractType
from ctrt4py.contract.catalog import IndexCatalog
from logging import getLogger
from types import MappingProxyType
from typing import NamedTuple

log = getLogger('ctrt4py')


class ContractCatalogs(NamedTuple):
    func: IndexCatalog
    state_var: IndexCatalog
    state_map: IndexCatalog


# contract type tag -> ContractCatalogs, written only while ctrt4py.contract imports
_registry = dict()
_view = MappingProxyType(_registry)
_sealed = False


def _register(tag, func, state_var, state_map):
    """register catalogs of a contract type, called once at module import"""
    if _sealed:
        raise CatalogDefinitionError('Registry is sealed, cannot register {!r}'.format(tag))
    if tag in _registry:
        raise CatalogDefinitionError('Already registered contract type {!r}'.format(tag))
    for cat, kind in ((func, C.IDX_FUNC), (state_var, C.IDX_STATE_VAR), (state_map, C.IDX_STATE_MAP)):
        if cat.kind != kind:
            raise CatalogDefinitionError('{} catalog of {!r} is {}'.format(kind, tag, cat.kind))
    catalogs = ContractCatalogs(func, state_var, state_map)
    _registry[tag] = catalogs
    log.debug("register contract type {} func={} state_var={} state_map={}"
              .format(tag, len(func), len(state_var), len(state_map)))
    return catalogs


def _seal():
    global _sealed
    _sealed = True
    log.debug("seal contract registry of {} types".format(len(_registry)))


def is_sealed():
    return _sealed


def catalog_for(tag) -> ContractCatalogs:
    try:
        return _view[tag]
    except (KeyError, TypeError):
        raise UnsupportedContractType('Not supported contract type {!r}'.format(tag))


def supported_types():
    return tuple(sorted(_view))


__all__ = [
    "ContractCatalogs",
    "is_sealed",
    "catalog_for",
    "supported_types",
]
