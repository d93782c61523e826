"""Immutable record of an anode/cathode line-charge pair.

`LineChargePair` holds the pair geometry and charge parameters and is registered
as a JAX pytree, so instances pass through `jax.jit`, `jax.vmap` and `jax.grad`.
Its methods evaluate the closed-form formulas of `eks_field.electric`.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.numpy as jnp

from . import electric


@jax.tree_util.register_pytree_node_class
@dataclass(frozen=True)
class LineChargePair:
    """An anode/cathode pair of parallel line charges sharing the x-coordinate `x_pair`.

    `charge_density` is the anode's line charge density (C/m); the cathode carries the
    opposite charge. `relative_permittivity` is the average value of the surrounding medium.
    """

    x_pair: float
    z_anode: float
    z_cathode: float
    charge_density: float
    relative_permittivity: float

    def tree_flatten(self):
        children = (
            self.x_pair,
            self.z_anode,
            self.z_cathode,
            self.charge_density,
            self.relative_permittivity,
        )
        return children, None

    @classmethod
    def tree_unflatten(cls, aux, children):
        del aux
        (x_pair, z_anode, z_cathode, charge_density, relative_permittivity) = children
        return cls(
            x_pair=x_pair,
            z_anode=z_anode,
            z_cathode=z_cathode,
            charge_density=charge_density,
            relative_permittivity=relative_permittivity,
        )

    @property
    def anode(self) -> tuple[float, float]:
        return self.x_pair, self.z_anode

    @property
    def cathode(self) -> tuple[float, float]:
        return self.x_pair, self.z_cathode

    @property
    def k(self) -> jnp.ndarray:
        """k multiplier (V) for this pair."""
        return electric.k(self.charge_density, self.relative_permittivity)

    def _geometry(self) -> tuple[float, float, float]:
        return self.x_pair, self.z_anode, self.z_cathode

    def voltage(self, x, z) -> jnp.ndarray:
        return electric.voltage(x, z, *self._geometry(), self.k)

    def Ex(self, x, z) -> jnp.ndarray:
        return electric.Ex(x, z, *self._geometry(), self.k)

    def Ez(self, x, z) -> jnp.ndarray:
        return electric.Ez(x, z, *self._geometry(), self.k)

    def E_mag(self, x, z) -> jnp.ndarray:
        return electric.E_mag(x, z, *self._geometry(), self.k)

    def field(self, x, z) -> jnp.ndarray:
        """Electric field (Ex, Ez) stacked along a trailing axis, shape (...,2)."""
        k_ = self.k
        ex = electric.Ex(x, z, *self._geometry(), k_)
        ez = electric.Ez(x, z, *self._geometry(), k_)
        return jnp.stack([ex, ez], axis=-1)

    def swapped(self) -> LineChargePair:
        """Same charge density with the anode and cathode locations exchanged."""
        return LineChargePair(
            x_pair=self.x_pair,
            z_anode=self.z_cathode,
            z_cathode=self.z_anode,
            charge_density=self.charge_density,
            relative_permittivity=self.relative_permittivity,
        )

    def reversed_polarity(self) -> LineChargePair:
        """Anode and cathode exchanged together with a sign flip of the charge density."""
        return LineChargePair(
            x_pair=self.x_pair,
            z_anode=self.z_cathode,
            z_cathode=self.z_anode,
            charge_density=-self.charge_density,
            relative_permittivity=self.relative_permittivity,
        )


def make_line_charge_pair(
    *,
    x_pair: float,
    z_anode: float,
    z_cathode: float,
    charge_density: float,
    relative_permittivity: float,
) -> LineChargePair:
    """Construct a `LineChargePair` from plain numbers (SI units)."""
    return LineChargePair(
        x_pair=float(x_pair),
        z_anode=float(z_anode),
        z_cathode=float(z_cathode),
        charge_density=float(charge_density),
        relative_permittivity=float(relative_permittivity),
    )
