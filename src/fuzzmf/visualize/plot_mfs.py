"""Defines method to plot membership functions."""
from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

import jax
import jax.numpy as jnp

from ..mfs import InputMF


def plot_mfs(
    mfs: Sequence[InputMF],
    *,
    xmin: float,
    xmax: float,
    names: Sequence[str]|None = None,
    title: str = "Membership Functions",
    n_points: int = 1000,
    path: str|None = None,
    show: bool = True,
) -> Figure:
    mfs = tuple(mfs)

    if len(mfs) == 0:
        raise ValueError("At least one membership function is required.")

    if names is None:
        names = [getattr(mf, "name", f"mf_{i+1}") for i, mf in enumerate(mfs)]
    elif len(names) != len(mfs):
        raise ValueError(f"Expected {len(mfs)} names, got {len(names)}.")

    if not xmin < xmax:
        raise ValueError(f"xmin must be < xmax, got {xmin} and {xmax}.")

    fig, ax = plt.subplots(1, 1)

    ax.set_title(title)
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(0.0, 1.05)
    ax.set_xlabel("Input Values")
    ax.set_ylabel("Membership Value")

    xs = jnp.linspace(xmin, xmax, n_points)
    for mf, name in zip(mfs, names):
        ys = jax.vmap(mf)(xs)
        ax.plot(xs, ys, label=name)

    ax.grid()
    ax.legend()

    if show:
        plt.show()

    if path is not None:
        fig.savefig(path)

    plt.close(fig)

    return fig
