# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: make src/ importable when tests run from a checkout.

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
