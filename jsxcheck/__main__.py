"""Allow ``python -m jsxcheck``."""

from jsxcheck.cli import main

raise SystemExit(main())
