from ctrt4py.config import C, CatalogDefinitionError, UnsupportedContractType
from ctrt4py.contract import IndexCatalog, catalog_for, supported_types, is_sealed
from ctrt4py.contract import registry, stable_swap, tok, tok_v2, nft_v2, v_option
import pytest


def test_supported_types():
    assert supported_types() == (
        'atomic_swap', 'lock', 'nft', 'nft_v2_blacklist', 'nft_v2_whitelist', 'pay_chan',
        'stable_swap', 'tok', 'tok_split', 'tok_v2_blacklist', 'tok_v2_whitelist',
        'v_escrow', 'v_option', 'v_swap')


def test_catalog_for():
    catalogs = catalog_for('stable_swap')
    assert catalogs.func is stable_swap.FuncIdx
    assert catalogs.state_var is stable_swap.StateVar
    assert catalogs.state_map is stable_swap.StateMapIdx
    assert catalog_for('tok_split').func.index_of('SPLIT') == 3
    assert 'SPLIT' not in catalog_for('tok').func
    assert catalog_for('tok_split').state_var.index_of('MAKER') == tok.StateVar.index_of('MAKER')


def test_v2_catalogs():
    assert catalog_for('tok_v2_whitelist').state_var is tok_v2.StateVar
    assert catalog_for('tok_v2_blacklist').func.index_of('UPDATE_LIST') == 3
    assert catalog_for('nft_v2_blacklist').func.index_of('UPDATE_LIST') == 2
    assert catalog_for('nft_v2_whitelist').state_map is nft_v2.StateMapIdx
    assert catalog_for('v_option').state_var.name_of(7) == 'OPTION_STATUS'
    assert len(catalog_for('v_escrow').state_map) == 18
    assert len(v_option.StateVar) == 15


def test_unsupported():
    with pytest.raises(UnsupportedContractType):
        catalog_for('sys')
    with pytest.raises(UnsupportedContractType):
        catalog_for(['stable_swap'])


def test_sealed():
    """no contract type is registered after import"""
    assert is_sealed()
    func = IndexCatalog(C.IDX_FUNC, 'late', ())
    state_var = IndexCatalog(C.IDX_STATE_VAR, 'late', ())
    state_map = IndexCatalog(C.IDX_STATE_MAP, 'late', ())
    with pytest.raises(CatalogDefinitionError):
        registry._register('late', func, state_var, state_map)
    with pytest.raises(UnsupportedContractType):
        catalog_for('late')
    assert 'late' not in supported_types()
    assert not hasattr(registry, 'register')


def test_read_only_view():
    with pytest.raises(TypeError):
        registry._view['late'] = catalog_for('stable_swap')


def test_register_twice(monkeypatch):
    monkeypatch.setattr(registry, '_sealed', False)
    with pytest.raises(CatalogDefinitionError):
        registry._register('stable_swap', stable_swap.FuncIdx, stable_swap.StateVar, stable_swap.StateMapIdx)
    assert catalog_for('stable_swap').func is stable_swap.FuncIdx


def test_register_wrong_kind(monkeypatch):
    monkeypatch.setattr(registry, '_sealed', False)
    func = IndexCatalog(C.IDX_FUNC, 'wrong', ())
    state_var = IndexCatalog(C.IDX_STATE_VAR, 'wrong', ())
    with pytest.raises(CatalogDefinitionError):
        registry._register('wrong', func, state_var, state_var)
    assert 'wrong' not in supported_types()
