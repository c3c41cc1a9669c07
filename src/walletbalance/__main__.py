"""Allow running the demonstration with ``python -m walletbalance``."""

import sys

from walletbalance.main import main

sys.exit(main())
