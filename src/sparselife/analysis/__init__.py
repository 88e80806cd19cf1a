"""
Analysis layer: derived quantities for inspection and validation.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- bounding_box / to_array / from_array: dense views of a sparse world
- population_series / center_of_mass: simple trajectory statistics
- reference_step / compare_with_reference: validate the sparse engine
  against a convolution-based dense step
- detect_period / classify: find oscillators and spaceships
"""

from sparselife.analysis.statistics import (
    bounding_box,
    to_array,
    from_array,
    population_series,
    center_of_mass,
)
from sparselife.analysis.reference import (
    NEIGHBOR_KERNEL,
    ComparisonResult,
    reference_step,
    split_clusters,
    compare_with_reference,
)
from sparselife.analysis.periodicity import (
    PeriodResult,
    normalize,
    detect_period,
    classify,
)

__all__ = [
    "bounding_box",
    "to_array",
    "from_array",
    "population_series",
    "center_of_mass",
    # Reference validation
    "NEIGHBOR_KERNEL",
    "ComparisonResult",
    "reference_step",
    "split_clusters",
    "compare_with_reference",
    # Periodicity
    "PeriodResult",
    "normalize",
    "detect_period",
    "classify",
]
