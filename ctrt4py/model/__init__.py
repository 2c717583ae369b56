from ctrt4py.model.base58 import *
from ctrt4py.model.hashes import *
from ctrt4py.model.packer import *
from ctrt4py.model.models import *
from ctrt4py.model import base58, hashes, packer, models

__all__ = list()
__all__ += base58.__all__
__all__ += hashes.__all__
__all__ += packer.__all__
__all__ += models.__all__
