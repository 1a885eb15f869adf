"""Run the CLI from a source checkout, without installing the package.

    python main.py 1234567890123 --since 2024-01-01 --until 2024-01-31
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
