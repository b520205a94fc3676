"""Define Base Membership Function Classes."""
from __future__ import annotations

import abc

import equinox as eqx

from ..utils.types import Array, ScalarLike


class Membership(eqx.Module, abc.ABC):
    """Marker for anything an output membership function can produce.
    """


class InputMF(eqx.Module, abc.ABC):
    """Fuzzification interface.

    Implementations are immutable and ``fuzzify`` must be a pure function of
    ``x`` and the instance's parameters, returning values in [0, 1] for finite
    inputs.
    """

    @abc.abstractmethod
    def fuzzify(self, x: ScalarLike) -> Array:
        raise NotImplementedError("fuzzify is not implemented for base input MF class.")

    def __call__(self, x: ScalarLike) -> Array:
        return self.fuzzify(x)


class OutputMF(eqx.Module, abc.ABC):
    """Defuzzification interface.
    """

    @abc.abstractmethod
    def membership(self, activation: ScalarLike) -> Membership:
        raise NotImplementedError("membership is not implemented for base output MF class.")
