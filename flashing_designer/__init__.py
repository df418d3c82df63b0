"""FlashingDesigner - bend allowance and pricing engine for sheet-metal flashing.

A profile is drawn as points joined by segments. The engine detects bends,
computes the developed (flat-pattern) length with the K-factor method, picks
a stockable strip width and prices the result.
"""

from . import core
from . import models
from . import storage

__all__ = ['core', 'models', 'storage']
