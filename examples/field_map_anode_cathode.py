#!/usr/bin/env python3
"""Example: voltage and electric field map of an anode/cathode pair in an EKS test cell.

An anode and a cathode are modelled as infinite line charges crossing the (x, z)
cross-section at (x_pair, z_anode) and (x_pair, z_cathode). With

  k = λ / (4π ε0 εr)

the voltage and field are evaluated in closed form on a regular grid:

  V  = k ln(r_cathode^2 / r_anode^2)
  |E| = sqrt(Ex^2 + Ez^2)

The grid is evaluated in a single broadcast call per quantity. Points that land
on the electrodes or on a pole of the field formulas return ±inf / nan; those
cells are masked in the figures and counted in the summary.

Run:
  python examples/field_map_anode_cathode.py
  python examples/field_map_anode_cathode.py --eps-r 25 --z-anode 0.3 --z-cathode -0.6
"""

from __future__ import annotations

if __package__ in (None, ""):
    import pathlib
    import sys

    root = pathlib.Path(__file__).resolve()
    while root != root.parent and not (root / "pyproject.toml").exists():
        root = root.parent
    sys.path.insert(0, str(root / "src"))

import argparse

import jax
import jax.numpy as jnp
import numpy as np

from eks_field import EPS0, make_line_charge_pair
from eks_field.plotting import ensure_dir, plot_field_lines, plot_field_map, set_plot_style


def main() -> None:
    jax.config.update("jax_enable_x64", True)

    p = argparse.ArgumentParser()
    p.add_argument("--x-pair", type=float, default=0.0, help="x of the anode/cathode pair [m]")
    p.add_argument("--z-anode", type=float, default=0.25, help="z of the anode [m]")
    p.add_argument("--z-cathode", type=float, default=-0.25, help="z of the cathode [m]")
    p.add_argument("--charge-density", type=float, default=1.0e-9, help="Anode line charge density [C/m]")
    p.add_argument("--eps-r", type=float, default=10.0, help="Average relative permittivity of the medium")
    p.add_argument("--width", type=float, default=1.0, help="Half-width of the cross-section in x [m]")
    p.add_argument("--depth", type=float, default=0.6, help="Half-height of the cross-section in z [m]")
    p.add_argument("--nx", type=int, default=201)
    p.add_argument("--nz", type=int, default=121)
    p.add_argument("--outdir", type=str, default="figures/field_map_anode_cathode")
    p.add_argument("--no-plots", action="store_true")
    args = p.parse_args()

    if args.z_anode == args.z_cathode:
        raise SystemExit("--z-anode and --z-cathode must differ.")
    if args.nx < 2 or args.nz < 2:
        raise SystemExit("--nx and --nz must be at least 2.")

    pair = make_line_charge_pair(
        x_pair=args.x_pair,
        z_anode=args.z_anode,
        z_cathode=args.z_cathode,
        charge_density=args.charge_density,
        relative_permittivity=args.eps_r,
    )

    print("Anode/cathode line-charge pair")
    print(f"  anode:   (x, z) = ({pair.x_pair}, {pair.z_anode}) m")
    print(f"  cathode: (x, z) = ({pair.x_pair}, {pair.z_cathode}) m")
    print(f"  lambda={pair.charge_density:.3e} C/m  eps_r={pair.relative_permittivity}  eps0={EPS0:.4e} F/m")
    print(f"  k = {float(pair.k):.6f} V")

    x = np.linspace(args.x_pair - args.width, args.x_pair + args.width, args.nx)
    z_mid = 0.5 * (args.z_anode + args.z_cathode)
    z = np.linspace(z_mid - args.depth, z_mid + args.depth, args.nz)
    X, Z = jnp.meshgrid(jnp.asarray(x), jnp.asarray(z))

    V = np.asarray(pair.voltage(X, Z))
    E = np.asarray(pair.field(X, Z))
    Ex = E[..., 0]
    Ez = E[..., 1]
    Emag = np.asarray(pair.E_mag(X, Z))

    n_bad = int(np.sum(~np.isfinite(Emag)))
    finite = np.isfinite(V)
    print(f"Grid: nx={args.nx} nz={args.nz}  ({args.nx * args.nz} points)")
    print(f"  V range (finite): [{V[finite].min():.4e}, {V[finite].max():.4e}] V")
    print(f"  |E| median (finite): {np.median(Emag[np.isfinite(Emag)]):.4e} V/m")
    print(f"  non-finite |E| points (poles): {n_bad}")

    if args.no_plots:
        return

    outdir = ensure_dir(args.outdir)
    set_plot_style()
    print(f"Output directory: {outdir}")

    v_lim = float(np.percentile(np.abs(V[finite]), 98))
    plot_field_map(
        x=x,
        z=z,
        data=V,
        title="Voltage",
        cbar_label="V [V]",
        path=outdir / "voltage.png",
        pair=pair,
        cmap="RdBu_r",
        vmin=-v_lim,
        vmax=v_lim,
    )
    plot_field_map(
        x=x,
        z=z,
        data=Emag,
        title="Electric field magnitude",
        cbar_label="|E| [V/m]",
        path=outdir / "E_mag.png",
        pair=pair,
        log=True,
    )
    plot_field_lines(
        x=x,
        z=z,
        Ex=Ex,
        Ez=Ez,
        title="Electric field lines",
        path=outdir / "field_lines.png",
        pair=pair,
    )
    print("Wrote voltage.png, E_mag.png, field_lines.png")


if __name__ == "__main__":
    main()
