"""
Capability string constants for PyLinReg.

Import from here, never use raw strings.

Usage:
    from pylinreg.core.capabilities import CAPABILITY_MATERIALIZED

    if ds.supports(CAPABILITY_MATERIALIZED):
        X = ds.columns(['a', 'b'])
"""

# Data is held in memory and can be returned as full numpy arrays
CAPABILITY_MATERIALIZED = 'materialized'

# Data can be read multiple times (fit on one pass, predict on another)
CAPABILITY_REPEATABLE = 'repeatable'

# Data arrived over the network (one-shot fetch, no retry)
CAPABILITY_REMOTE = 'remote'

ALL_CAPABILITIES = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_REMOTE,
})

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_REMOTE',
    'ALL_CAPABILITIES',
]
