"""
Core protocols for PyLinReg.

We use Protocol (structural typing) rather than ABC (nominal typing) so
backends only have to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinreg.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload. The backend handles all hardware-
    specific computation (CPU/GPU, precision).

    Backends are stateless. All configuration is passed via the design
    or at construction time. This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_svd', 'gpu_svd_fp32'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
