from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .pair import LineChargePair


logger = logging.getLogger(__name__)


def _init_matplotlib_config() -> None:
    # Matplotlib/fontconfig caches often default to non-writable locations in sandboxes.
    mpl_dir = Path(os.environ.get("MPLCONFIGDIR", "")) if os.environ.get("MPLCONFIGDIR") else None
    if mpl_dir is None or not str(mpl_dir):
        mpl_dir = Path(tempfile.gettempdir()) / "eks_field_mplconfig"
        os.environ["MPLCONFIGDIR"] = str(mpl_dir)
    mpl_dir.mkdir(parents=True, exist_ok=True)

    xdg_cache = Path(os.environ.get("XDG_CACHE_HOME", "")) if os.environ.get("XDG_CACHE_HOME") else None
    if xdg_cache is None or not str(xdg_cache):
        xdg_cache = Path(tempfile.gettempdir()) / "eks_field_cache"
        os.environ["XDG_CACHE_HOME"] = str(xdg_cache)
    xdg_cache.mkdir(parents=True, exist_ok=True)


_init_matplotlib_config()

import matplotlib  # noqa: E402  (after MPLCONFIGDIR)

# Force a non-interactive backend so examples work on headless systems.
matplotlib.use("Agg", force=True)  # noqa: E402

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import LogNorm  # noqa: E402


def set_plot_style(*, small: bool = False) -> None:
    """Set consistent, publication-style Matplotlib defaults."""
    base = 11.0 if not small else 9.5
    plt.rcParams.update(
        {
            "font.size": base,
            "axes.labelsize": base + 1,
            "axes.titlesize": base + 2,
            "legend.fontsize": base - 1,
            "xtick.labelsize": base - 1,
            "ytick.labelsize": base - 1,
            "axes.grid": False,
            "axes.linewidth": 1.0,
            "lines.linewidth": 1.6,
            "lines.markersize": 6.0,
            "figure.figsize": (6.5, 5.0) if not small else (5.5, 4.2),
            "savefig.dpi": 300,
            "savefig.bbox": "tight",
            "legend.frameon": False,
        }
    )


def ensure_dir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def savefig(fig: plt.Figure, path: str | Path, *, dpi: int = 300) -> Path:
    path = Path(path)
    ensure_dir(path.parent)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    logger.debug("Saved figure %s", path)
    return path


def _as_numpy(x):
    return np.asarray(x)


def _check_grid(x: np.ndarray, z: np.ndarray, data: np.ndarray, *, name: str) -> None:
    if x.ndim != 1 or z.ndim != 1:
        raise ValueError(f"x and z must be 1D axes, got shapes {x.shape} and {z.shape}")
    expected = (z.size, x.size)
    if data.shape != expected:
        raise ValueError(f"{name} has shape {data.shape}, expected (z.size, x.size) = {expected}")


def _overlay_electrodes(ax, pair: LineChargePair | None) -> None:
    if pair is None:
        return
    xa, za = (float(v) for v in pair.anode)
    xc, zc = (float(v) for v in pair.cathode)
    ax.scatter([xa], [za], s=60, marker="o", c="tab:red", ec="k", lw=0.8, zorder=5, label="anode")
    ax.scatter([xc], [zc], s=60, marker="s", c="tab:blue", ec="k", lw=0.8, zorder=5, label="cathode")
    ax.legend(loc="upper right")


def plot_field_map(
    *,
    x: np.ndarray,
    z: np.ndarray,
    data: np.ndarray,
    title: str,
    cbar_label: str,
    path: str | Path,
    pair: LineChargePair | None = None,
    cmap: str = "viridis",
    vmin=None,
    vmax=None,
    log: bool = False,
) -> Path:
    """Plot a scalar map on the (x, z) cross-section.

    `data` has shape (z.size, x.size), i.e. rows follow z. Non-finite values (poles of
    the field formulas) are masked rather than drawn.
    """
    x = _as_numpy(x)
    z = _as_numpy(z)
    data = _as_numpy(data)
    _check_grid(x, z, data, name="data")

    masked = np.ma.masked_invalid(data)
    if log:
        masked = np.ma.masked_less_equal(masked, 0.0)

    fig, ax = plt.subplots(constrained_layout=True)
    norm = None
    if log:
        norm = LogNorm(vmin=vmin, vmax=vmax)
        vmin = vmax = None
    im = ax.pcolormesh(x, z, masked, shading="auto", cmap=cmap, vmin=vmin, vmax=vmax, norm=norm)
    ax.set_title(title)
    ax.set_xlabel("x [m]")
    ax.set_ylabel("z [m]")
    ax.set_aspect("equal")
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label(cbar_label)

    _overlay_electrodes(ax, pair)
    return savefig(fig, path)


def plot_field_lines(
    *,
    x: np.ndarray,
    z: np.ndarray,
    Ex: np.ndarray,
    Ez: np.ndarray,
    title: str,
    path: str | Path,
    pair: LineChargePair | None = None,
    density: float = 1.2,
) -> Path:
    """Streamlines of the in-plane field (Ex, Ez), coloured by log10 |E|."""
    x = _as_numpy(x)
    z = _as_numpy(z)
    Ex = _as_numpy(Ex)
    Ez = _as_numpy(Ez)
    _check_grid(x, z, Ex, name="Ex")
    _check_grid(x, z, Ez, name="Ez")

    # Streamplot cannot integrate through inf/nan; zero them so lines stop at the poles.
    finite = np.isfinite(Ex) & np.isfinite(Ez)
    U = np.where(finite, Ex, 0.0)
    W = np.where(finite, Ez, 0.0)
    mag = np.hypot(U, W)
    floor = float(mag[mag > 0].min()) if np.any(mag > 0) else 1.0
    color = np.log10(np.maximum(mag, floor))

    fig, ax = plt.subplots(constrained_layout=True)
    strm = ax.streamplot(x, z, U, W, color=color, cmap="magma", density=density, linewidth=1.0)
    ax.set_title(title)
    ax.set_xlabel("x [m]")
    ax.set_ylabel("z [m]")
    ax.set_aspect("equal")
    cbar = fig.colorbar(strm.lines, ax=ax)
    cbar.set_label(r"$\log_{10}|E|$ [V/m]")

    _overlay_electrodes(ax, pair)
    return savefig(fig, path)
