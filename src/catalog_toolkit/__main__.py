"""Allow ``python -m catalog_toolkit``."""

from catalog_toolkit.cli import main

raise SystemExit(main())
