"""
Tolerance tiers for numerical validation.

A fit computed in float64 is expected to agree with a reference
pseudo-inverse solve to near machine precision; a float32 fit only to
about four significant digits, and either loses more on an ill-conditioned
design. ComputeConfig.tolerance() and LinearSolution.tolerance() pick
their comparison tolerances from here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """rtol/atol pair for comparing results in one precision."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, matches a float64 reference pinv solve',
)

# Ill-conditioned designs (cond > 1e4) lose digits even in float64
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned design',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision, statistically equivalent',
)

FP32_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp32_ill_conditioned',
    description='single precision, ill-conditioned design',
)

# cond(X) above which a design counts as ill-conditioned
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(dtype: str, is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a precision name ('float32'/'float64')."""
    if dtype == 'float32':
        return FP32_ILL_CONDITIONED if is_ill_conditioned else FP32
    return FP64_ILL_CONDITIONED if is_ill_conditioned else FP64
