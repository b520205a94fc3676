"""
fuzzmf: fuzzy membership function kernels for JAX.

Membership functions are immutable Equinox modules, so they can be passed
through ``jax.jit``, ``jax.vmap`` and ``jax.grad`` like any other pytree.
"""

__version__ = "0.1.0"

from .mfs import InputMF, Membership, OutputMF, TriMF
