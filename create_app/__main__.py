"""Allow ``python -m create_app``."""

import sys

from create_app.cli.commands import main

sys.exit(main())
