# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Module Entry Point
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
import sys

from stratos_ci.cli import main

if __name__ == "__main__":
    sys.exit(main())
