"""
Simulation module - throw spread model and hit probabilities.
"""
from .throw_simulator import (
    UniformSource,
    make_rng,
    resolve_rng,
    sample_gaussian_2d,
    simulate_throw,
    execute_throw,
    throw_at_point,
)
from .hit_probability import (
    AreaType,
    area_regions,
    region_probability,
    hit_probability,
    estimate_hit_probability,
)

__all__ = [
    "UniformSource",
    "make_rng",
    "resolve_rng",
    "sample_gaussian_2d",
    "simulate_throw",
    "execute_throw",
    "throw_at_point",
    "AreaType",
    "area_regions",
    "region_probability",
    "hit_probability",
    "estimate_hit_probability",
]
