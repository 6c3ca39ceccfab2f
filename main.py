from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from text_similarity.cli import cli, main  # noqa: E402

__all__ = ["cli", "main"]


if __name__ == "__main__":
    main()
