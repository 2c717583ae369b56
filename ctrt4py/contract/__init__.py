from ctrt4py.contract.catalog import *
from ctrt4py.contract.registry import *
from ctrt4py.contract.dbkey import *
from ctrt4py.contract.ctrt import *
from ctrt4py.contract import stable_swap, v_swap, lock, tok, nft
from ctrt4py.contract import atomic_swap, pay_chan, v_escrow, v_option, tok_v2, nft_v2
from ctrt4py.contract.stable_swap import StableSwapDBKey, StableSwapCtrt
from ctrt4py.contract.v_swap import VSwapDBKey
from ctrt4py.contract.lock import LockDBKey
from ctrt4py.contract.tok import TokDBKey
from ctrt4py.contract.nft import NFTDBKey
from ctrt4py.contract.atomic_swap import AtomicSwapDBKey
from ctrt4py.contract.pay_chan import PayChanDBKey
from ctrt4py.contract.v_escrow import VEscrowDBKey
from ctrt4py.contract.v_option import VOptionDBKey
from ctrt4py.contract.tok_v2 import TokV2DBKey
from ctrt4py.contract.nft_v2 import NFTV2DBKey
from ctrt4py.contract import catalog, registry, dbkey, ctrt

# all contract types are registered above, no more registration
registry._seal()

__all__ = [
    "stable_swap",
    "v_swap",
    "lock",
    "tok",
    "nft",
    "atomic_swap",
    "pay_chan",
    "v_escrow",
    "v_option",
    "tok_v2",
    "nft_v2",
    "StableSwapDBKey",
    "StableSwapCtrt",
    "VSwapDBKey",
    "LockDBKey",
    "TokDBKey",
    "NFTDBKey",
    "AtomicSwapDBKey",
    "PayChanDBKey",
    "VEscrowDBKey",
    "VOptionDBKey",
    "TokV2DBKey",
    "NFTV2DBKey",
]
__all__ += catalog.__all__
__all__ += registry.__all__
__all__ += dbkey.__all__
__all__ += ctrt.__all__
