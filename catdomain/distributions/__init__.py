"""
Distributions module: generative distributions over integer values.
"""

from catdomain.distributions.poisson import Poisson

__all__ = ["Poisson"]
