"""Allow `python -m billbalance`."""

import sys

from billbalance.cli import main


sys.exit(main())
