"""
catdomain: Categorical Domains

Stable, densely-packed integer indexing of categorical values, so numeric
machinery can treat categorical data as integers in [0, N).

Key components:
- core: Domain registries, counting/trimming, scopes, change logs, errors
- variables: Observation and variable handles, identity-indexed entities
- pipeline: Count -> trim -> reload vocabulary construction
- distributions: Poisson distribution over integer values
"""

__version__ = "1.0.0"
__author__ = "Juan Zambrano, Enrique ter Horst, Sridhar Mahadevan"

from catdomain.core.errors import (
    CategoricalError,
    IndexOutOfRange,
    UnsetValue,
    EmptyDomain,
    StaleHandle,
)
from catdomain.core.registry import DomainRegistry
from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.scope import DomainScope
from catdomain.core.difflist import ChangeLog, IndexChange, DiffList
from catdomain.variables.handles import UNSET, CategoricalObservation, CategoricalVariable
from catdomain.variables.itemized import ItemizedEntity
from catdomain.pipeline.vocabulary import VocabularyResult, build_vocabulary
from catdomain.distributions.poisson import Poisson

__all__ = [
    # Errors
    "CategoricalError",
    "IndexOutOfRange",
    "UnsetValue",
    "EmptyDomain",
    "StaleHandle",
    # Registries
    "DomainRegistry",
    "CountingDomainRegistry",
    "DomainScope",
    # Change logs
    "ChangeLog",
    "IndexChange",
    "DiffList",
    # Handles
    "UNSET",
    "CategoricalObservation",
    "CategoricalVariable",
    "ItemizedEntity",
    # Pipeline
    "VocabularyResult",
    "build_vocabulary",
    # Distributions
    "Poisson",
]
