"""Allow python -m number_mixers to run the demo driver."""
from __future__ import annotations

from number_mixers.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
