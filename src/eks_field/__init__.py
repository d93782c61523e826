"""Electrostatics of an anode/cathode line-charge pair in a 2D (x, z) cross-section.

Core model:
  - Two infinite, parallel line charges of opposite sign cross the (x, z) plane at
    (x_pair, z_anode) and (x_pair, z_cathode).
  - A common multiplier k = λ / (4π ε0 εr) (volts) scales every quantity.
  - The voltage follows the logarithmic line-charge potential
        V = k ln(r_cathode^2 / r_anode^2),
    and the field components Ex, Ez are closed-form expressions in the same
    geometry, with |E| = sqrt(Ex^2 + Ez^2).

The formulas are used by simulations of electrokinetic soil consolidation test
cells, which supply the geometry and charge for each evaluation point. All
functions are written with `jax.numpy`, so they broadcast over arrays and can be
wrapped in `jax.jit`, `jax.vmap` and `jax.grad`.
The package switches JAX to 64-bit mode on import, so every result is an IEEE
double.
"""

import jax

jax.config.update("jax_enable_x64", True)

from .electric import EPS0, E_mag, Ex, Ez, k, voltage  # noqa: E402
from .pair import LineChargePair, make_line_charge_pair  # noqa: E402

__all__ = [
    "EPS0",
    "k",
    "voltage",
    "Ex",
    "Ez",
    "E_mag",
    "LineChargePair",
    "make_line_charge_pair",
]
