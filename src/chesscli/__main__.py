"""Allow ``python -m chesscli``."""

from chesscli.cli import main

raise SystemExit(main())
