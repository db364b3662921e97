"""Allow running the generator with ``python -m dcgen``."""

from __future__ import annotations

from dcgen.main import main

if __name__ == "__main__":
    main()
