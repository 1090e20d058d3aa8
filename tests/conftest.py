"""
Test-time path setup.

The project is a flat set of top-level modules. Depending on where pytest is
invoked, the project root may or may not be on `sys.path`, so put it there.
"""

from __future__ import annotations

import sys
from pathlib import Path


_ROOT = Path(__file__).resolve().parents[1]

if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))
