"""Run script for `python -m main` from inside `src/`."""

from __future__ import annotations

import sys

from cli.main import run

if __name__ == "__main__":
    if sys.platform == "win32":
        # Document and file names are Thai; the default console code page cannot encode them.
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()
