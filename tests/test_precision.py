import math
import os
import subprocess
import sys
from pathlib import Path

import numpy as np


SRC = Path(__file__).resolve().parents[1] / "src"

# Runs without conftest and without touching jax.config: only the package import.
_SCRIPT = """
from eks_field import Ex, k, voltage

k_ = k(1.0e-9, 10.0)
V = voltage(0.7, 0.3, 0.0, 1.0, -1.0, 0.8988)
ex = Ex(0.5, 0.2, 0.0, 1.0, -1.0, 0.8988)
tiny = k(1.0e-50, 10.0)
for name, val in (("k", k_), ("V", V), ("Ex", ex), ("tiny", tiny)):
    print(name, val.dtype, repr(float(val)))
"""


def _run_fresh_interpreter() -> dict[str, tuple[str, float]]:
    env = dict(os.environ)
    env.pop("JAX_ENABLE_X64", None)
    env["PYTHONPATH"] = os.pathsep.join([str(SRC), env.get("PYTHONPATH", "")])
    proc = subprocess.run(
        [sys.executable, "-c", _SCRIPT], capture_output=True, text=True, env=env, check=True
    )
    out = {}
    for line in proc.stdout.strip().splitlines():
        name, dtype, value = line.split()
        out[name] = (dtype, float(value))
    return out


def test_default_import_returns_float64_within_double_tolerance():
    out = _run_fresh_interpreter()
    assert {dtype for dtype, _ in out.values()} == {"float64"}

    k_expected = 1.0e-9 / (4 * math.pi * 8.854e-12 * 10.0)
    V_expected = 0.8988 * math.log((0.49 + 1.69) / (0.49 + 0.49))
    Ex_expected = 2.0 * 0.8988 * (1.0 / (0.25 - 0.64) - 1.0 / (0.25 - 1.44))
    tiny_expected = 1.0e-50 / (4 * math.pi * 8.854e-12 * 10.0)

    np.testing.assert_allclose(out["k"][1], k_expected, rtol=1e-9)
    np.testing.assert_allclose(out["V"][1], V_expected, rtol=1e-9)
    np.testing.assert_allclose(out["Ex"][1], Ex_expected, rtol=1e-9)
    # Underflows to zero in single precision.
    assert out["tiny"][1] > 0.0
    np.testing.assert_allclose(out["tiny"][1], tiny_expected, rtol=1e-9)
