"""
Variables module: categorical handles and identity-indexed entities.
"""

from catdomain.variables.handles import UNSET, CategoricalHandle, CategoricalObservation, CategoricalVariable
from catdomain.variables.itemized import ItemizedEntity

__all__ = [
    "UNSET",
    "CategoricalHandle",
    "CategoricalObservation",
    "CategoricalVariable",
    "ItemizedEntity",
]
