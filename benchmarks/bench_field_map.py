#!/usr/bin/env python3
"""Benchmark: grid evaluation of voltage and field magnitude for a line-charge pair.

Run:
  - `python benchmarks/bench_field_map.py`
"""

from __future__ import annotations

if __package__ in (None, ""):
    import pathlib
    import sys

    sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import time

import jax
import jax.numpy as jnp

from eks_field import E_mag, k, voltage


def main() -> None:
    jax.config.update("jax_enable_x64", True)

    x_pair = 0.0
    z_anode = 0.25
    z_cathode = -0.25
    k_ = k(1.0e-9, 10.0)

    nx = 1000
    nz = 1000
    X, Z = jnp.meshgrid(jnp.linspace(-1.0, 1.0, nx), jnp.linspace(-1.0, 1.0, nz))

    def evaluate(X, Z):
        V = voltage(X, Z, x_pair, z_anode, z_cathode, k_)
        Emag = E_mag(X, Z, x_pair, z_anode, z_cathode, k_)
        return V, Emag

    t0 = time.perf_counter()
    V, Emag = evaluate(X, Z)
    Emag.block_until_ready()
    t1 = time.perf_counter()
    print(f"eager_s: {t1 - t0:.3f}  shape={V.shape}")

    evaluate_jit = jax.jit(evaluate)

    t0 = time.perf_counter()
    V, Emag = evaluate_jit(X, Z)
    Emag.block_until_ready()
    t1 = time.perf_counter()
    print(f"compile+run_s: {t1 - t0:.3f}")

    n_iter = 10
    t0 = time.perf_counter()
    for _ in range(n_iter):
        V, Emag = evaluate_jit(X, Z)
    Emag.block_until_ready()
    t1 = time.perf_counter()
    print(f"avg_run_s: {(t1 - t0) / n_iter:.4f} over {n_iter} iters")


if __name__ == "__main__":
    main()
