#!/usr/bin/env python3

"""Post the check results PR comment for the current workflow run."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pkg.checkreport.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
