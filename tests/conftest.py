import sys
from pathlib import Path


def _ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    sys.path.insert(0, str(src))


_ensure_src_on_path()

import jax  # noqa: E402

# Double precision before any test module builds arrays.
jax.config.update("jax_enable_x64", True)
