"""Defines Triangle Membership Function Class."""
from __future__ import annotations

from typing import Sequence
import warnings

import equinox as eqx
import jax.numpy as jnp

from .base_mf import InputMF
from .functions import tri_coefficients, tri_fuzzify
from ..utils.types import Array, ScalarLike, F32_EPS


warnings.simplefilter("once", UserWarning)


class TriMF(InputMF):
    """Triangular membership function.

    Stores the rising and falling segments as ``y = slope * x + intcpt``
    together with the sorted control points ``a <= xstar <= b``. Control
    points may be given in any order. A zero-width segment gets a slope of 0,
    so ``TriMF(0, 0, 1)`` is a descending ramp and ``TriMF(0, 1, 1)`` an
    ascending one.
    """
    slope1: Array
    intcpt1: Array
    slope2: Array
    intcpt2: Array
    a: Array
    xstar: Array
    b: Array

    name: str = eqx.field(static=True, default="tri", kw_only=True)
    eps: float = eqx.field(static=True, default=F32_EPS, kw_only=True)

    def __init__(
        self,
        a: ScalarLike,
        xstar: ScalarLike,
        b: ScalarLike,
        *,
        name: str = "tri",
        eps: float = F32_EPS,
    ) -> None:
        (
            self.slope1,
            self.intcpt1,
            self.slope2,
            self.intcpt2,
            self.a,
            self.xstar,
            self.b,
        ) = tri_coefficients(a, xstar, b, eps)

        self.name = name
        self.eps = eps

    @classmethod
    def from_params(cls, params: Sequence[ScalarLike], **kwargs) -> "TriMF":
        if len(params) != 3:
            raise ValueError(f"Triangle requires exactly 3 parameters, got {len(params)}.")

        a, xstar, b = params
        return cls(a, xstar, b, **kwargs)

    def fuzzify(self, x: ScalarLike) -> Array:
        return tri_fuzzify(
            x,
            self.slope1,
            self.intcpt1,
            self.slope2,
            self.intcpt2,
            self.a,
            self.xstar,
            self.b,
        )

    @property
    def params(self) -> Array:
        return jnp.stack([self.a, self.xstar, self.b])

    def validate(self) -> None:
        if not bool(jnp.all(jnp.isfinite(self.params))):
            raise ValueError(f"Triangle control points must be finite, got {self.params}.")

        if float(self.b - self.a) <= self.eps:
            warnings.warn(
                f"Triangle \"{self.name}\" has zero-width support at {float(self.xstar)}.",
                UserWarning,
            )
