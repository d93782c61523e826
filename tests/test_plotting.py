import jax

jax.config.update("jax_enable_x64", True)

import jax.numpy as jnp
import numpy as np
import pytest

from eks_field import make_line_charge_pair
from eks_field.plotting import plot_field_lines, plot_field_map, savefig


def _grid():
    pair = make_line_charge_pair(
        x_pair=0.0, z_anode=0.5, z_cathode=-0.5, charge_density=1.0e-9, relative_permittivity=20.0
    )
    x = np.linspace(-1.0, 1.0, 21)
    z = np.linspace(-1.0, 1.0, 41)
    X, Z = jnp.meshgrid(x, z)
    return pair, x, z, X, Z


def test_plot_field_map_writes_png_with_poles_in_grid(tmp_path):
    pair, x, z, X, Z = _grid()
    V = np.asarray(pair.voltage(X, Z))
    assert not np.all(np.isfinite(V)), "grid should hit the anode/cathode exactly"

    path = plot_field_map(
        x=x, z=z, data=V, title="Voltage", cbar_label="V [V]", path=tmp_path / "maps" / "V.png", pair=pair
    )
    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_field_map_log_scale(tmp_path):
    pair, x, z, X, Z = _grid()
    Emag = np.asarray(pair.E_mag(X, Z))
    path = plot_field_map(
        x=x, z=z, data=Emag, title="|E|", cbar_label="|E| [V/m]", path=tmp_path / "Emag.png", log=True
    )
    assert path.exists()


def test_plot_field_lines_writes_png(tmp_path):
    pair, x, z, X, Z = _grid()
    path = plot_field_lines(
        x=x,
        z=z,
        Ex=np.asarray(pair.Ex(X, Z)),
        Ez=np.asarray(pair.Ez(X, Z)),
        title="Field lines",
        path=tmp_path / "lines.png",
        pair=pair,
    )
    assert path.exists()


def test_plot_field_map_rejects_transposed_data(tmp_path):
    _, x, z, X, Z = _grid()
    with pytest.raises(ValueError, match="expected"):
        plot_field_map(
            x=x, z=z, data=np.zeros((x.size, z.size)), title="t", cbar_label="c", path=tmp_path / "bad.png"
        )
    assert not (tmp_path / "bad.png").exists()


def test_plot_field_lines_rejects_2d_axes(tmp_path):
    _, x, z, X, Z = _grid()
    E = np.zeros(X.shape)
    with pytest.raises(ValueError, match="1D axes"):
        plot_field_lines(x=np.asarray(X), z=np.asarray(Z), Ex=E, Ez=E, title="t", path=tmp_path / "bad.png")


def test_savefig_creates_parent_dirs(tmp_path):
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])
    out = savefig(fig, tmp_path / "a" / "b" / "line.png", dpi=50)
    assert out.exists()
