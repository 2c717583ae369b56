from typing import Optional


class C:  # Constant
    # index width (struct format)
    FUNC_IDX_FORMAT = '>H'  # 2bytes unsigned
    STATE_VAR_FORMAT = '>B'  # 1byte unsigned
    STATE_MAP_FORMAT = '>B'  # 1byte unsigned

    # index kinds
    IDX_FUNC = 'FuncIdx'
    IDX_STATE_VAR = 'StateVar'
    IDX_STATE_MAP = 'StateMapIdx'
    idx_kind2format = {
        IDX_FUNC: FUNC_IDX_FORMAT,
        IDX_STATE_VAR: STATE_VAR_FORMAT,
        IDX_STATE_MAP: STATE_MAP_FORMAT,
    }

    # data entry tags
    DE_PUB_KEY = 1
    DE_ADDR = 2
    DE_AMOUNT = 3
    DE_INT32 = 4
    DE_STR = 5
    DE_CTRT_ACNT = 6
    DE_ACNT = 7
    DE_TOKEN_ID = 8
    DE_TIMESTAMP = 9
    DE_BOOL = 10
    DE_BYTES = 11
    DE_BALANCE = 12

    # address params
    ADDR_VERSION = 5
    ADDR_BYTES_LEN = 26  # version + chain_id + pubkey_hash + checksum
    PUBKEY_HASH_LEN = 20
    CHECKSUM_LEN = 4

    # contract & token id params
    CTRT_ADDR_VER = 6
    TOKEN_ADDR_VER = -124
    TOKEN_IDX_BYTES_LEN = 4
    CTRT_ID_BYTES_LEN = 26
    TOKEN_ID_BYTES_LEN = 30
    MAINNET_VSYS_TOK_ID = 'TWatCreEv7ayv6iAfLgke6ppVV33kDjFqSJn8yicf'
    TESTNET_VSYS_TOK_ID = 'TWuKDNU1SAheHR99s1MbGZLPh1KophEmKk1eeU3mW'

    # coin & fee
    VSYS_UNIT = 10 ** 8
    FEE_SCALE = 100
    DEFAULT_FEE = VSYS_UNIT // 10  # 0.1 VSYS
    EXEC_CTRT_FEE = VSYS_UNIT * 3 // 10  # 0.3 VSYS
    REG_CTRT_FEE = VSYS_UNIT * 100  # 100 VSYS

    # timestamp is nanoseconds on the ledger
    TIMESTAMP_SCALE = 10 ** 6  # from milliseconds

    # tx type
    TX_EXECUTE_CONTRACT_FUNCTION = 9


class V:
    # node api
    API_ENDPOINT: Optional[str] = None  # ex. http://127.0.0.1:9924
    API_KEY: str = ''
    API_TIMEOUT = 5  # sec

    # chain
    CHAIN_ID: Optional[str] = None  # 'M' mainnet or 'T' testnet


class CtrtError(Exception):
    pass


class CatalogDefinitionError(CtrtError):
    pass


class UnknownIndexName(CtrtError, KeyError):
    pass


class UnknownIndexCode(CtrtError, KeyError):
    pass


class InvalidFormat(CtrtError, ValueError):
    pass


class MalformedValue(CtrtError, ValueError):
    pass


class UnsupportedContractType(CtrtError):
    pass


class NodeAPIError(CtrtError):
    pass


__all__ = [
    'C',
    'V',
    'CtrtError',
    'CatalogDefinitionError',
    'UnknownIndexName',
    'UnknownIndexCode',
    'InvalidFormat',
    'MalformedValue',
    'UnsupportedContractType',
    'NodeAPIError',
]
