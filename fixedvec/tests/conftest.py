"""Pytest configuration for fixedvec tests."""
from __future__ import annotations

import os
import sys
from pathlib import Path

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# //2.- Build the default vector aliases from package defaults, not the caller's shell.
for _name in ("FIXEDVEC_DEFAULT_SCALAR", "FIXEDVEC_INDEX_POLICY"):
    os.environ.pop(_name, None)
