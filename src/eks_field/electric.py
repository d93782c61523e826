"""Closed-form electrostatics of an anode/cathode pair of infinite line charges.

Both line charges run out of the (x, z) cross-section plane and share the same
x-coordinate `x_pair`; the anode sits at z = `z_anode`, the cathode at
z = `z_cathode`. All quantities are SI:

  - coordinates in metres [m]
  - line charge density in coulombs per metre [C/m]
  - relative permittivity dimensionless
  - the k multiplier, voltages in volts [V]

Every function is a plain `jax.numpy` expression, so scalars, NumPy arrays and
JAX arrays are all accepted and broadcast against each other. Singular points
are not guarded: division by zero and log(0) produce ±inf / nan exactly as
IEEE-754 prescribes, and those values are returned to the caller.
"""

from __future__ import annotations

import jax.numpy as jnp


EPS0 = 8.854e-12  # vacuum permittivity [F/m]


def k(charge_density, relative_permittivity) -> jnp.ndarray:
    """Common multiplier (V) of the voltage and field equations.

      k = λ / (4π ε0 εr)

    `charge_density` λ is in C/m and may be negative. `relative_permittivity` εr
    is the average relative permittivity of the medium.
    """
    charge_density = jnp.asarray(charge_density)
    relative_permittivity = jnp.asarray(relative_permittivity)
    return charge_density / (4 * jnp.pi * EPS0 * relative_permittivity)


def voltage(x, z, x_pair, z_anode, z_cathode, k_) -> jnp.ndarray:
    """Voltage (V) at (x, z) due to the anode at (x_pair, z_anode) and cathode at (x_pair, z_cathode).

      V = k ln( r_cathode^2 / r_anode^2 )

    with r_anode, r_cathode the distances from the probe to each line charge.
    """
    x = jnp.asarray(x)
    z = jnp.asarray(z)
    dx2 = (x - x_pair) ** 2
    distance_factor = (dx2 + (z - z_cathode) ** 2) / (dx2 + (z - z_anode) ** 2)
    return k_ * jnp.log(distance_factor)


def _denominators(x, z, x_pair, z_anode, z_cathode) -> tuple[jnp.ndarray, jnp.ndarray]:
    # Differences of squares, not distances: the pole locus is |x - x_pair| = |z - z_source|.
    x = jnp.asarray(x)
    z = jnp.asarray(z)
    dx2 = (x - x_pair) ** 2
    d_anode = dx2 - (z_anode - z) ** 2
    d_cathode = dx2 - (z - z_cathode) ** 2
    return d_anode, d_cathode


def Ex(x, z, x_pair, z_anode, z_cathode, k_) -> jnp.ndarray:
    """x-component of the electric field (V/m) at (x, z).

      Ex = 2k [ 1/((x-x_pair)^2 - (z_anode-z)^2) - 1/((x-x_pair)^2 - (z-z_cathode)^2) ]
    """
    d_anode, d_cathode = _denominators(x, z, x_pair, z_anode, z_cathode)
    return 2.0 * k_ * (1.0 / d_anode - 1.0 / d_cathode)


def Ez(x, z, x_pair, z_anode, z_cathode, k_) -> jnp.ndarray:
    """z-component of the electric field (V/m) at (x, z).

      Ez = 2k [ (z-z_anode)/((x-x_pair)^2 - (z_anode-z)^2) - (z_cathode-z)/((x-x_pair)^2 - (z-z_cathode)^2) ]
    """
    z = jnp.asarray(z)
    d_anode, d_cathode = _denominators(x, z, x_pair, z_anode, z_cathode)
    return 2.0 * k_ * ((z - z_anode) / d_anode - (z_cathode - z) / d_cathode)


def E_mag(x, z, x_pair, z_anode, z_cathode, k_) -> jnp.ndarray:
    """Magnitude of the electric field (V/m) at (x, z): sqrt(Ex^2 + Ez^2)."""
    ex = Ex(x, z, x_pair, z_anode, z_cathode, k_)
    ez = Ez(x, z, x_pair, z_anode, z_cathode, k_)
    return jnp.sqrt(ex**2 + ez**2)
