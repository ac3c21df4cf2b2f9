"""
Tests for the Result[P] envelope and the Backend protocol.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinreg.core.protocols import Backend
from pylinreg.core.result import Result
from pylinreg.regression.backends import CPUSVDBackend


@dataclass(frozen=True)
class FakeParams:
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={'method': 'svd'},
        timing={'total_seconds': 0.01, 'svd': 0.005},
        backend_name='cpu_svd',
    )
    kwargs.update(overrides)
    return Result(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_fields(self):
        result = _result()
        assert result.params.value == 1.0
        assert result.info['method'] == 'svd'
        assert result.timing['svd'] == 0.005
        assert result.backend_name == 'cpu_svd'

    def test_timing_optional(self):
        assert _result(timing=None).timing is None

    def test_warnings_default_empty(self):
        assert _result().warnings == ()

    def test_frozen(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'other'


# ═══════════════════════════════════════════════════════════════════════
# Backend protocol
# ═══════════════════════════════════════════════════════════════════════


class TestBackendProtocol:

    def test_cpu_backend_satisfies_protocol(self):
        assert isinstance(CPUSVDBackend(), Backend)

    def test_object_without_solve_does_not(self):
        class NotABackend:
            name = 'nothing'

        assert not isinstance(NotABackend(), Backend)
