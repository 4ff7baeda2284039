"""Allow running as `python -m coinbase_pro_api`."""

import sys

from coinbase_pro_api.cli import main

if __name__ == "__main__":
    sys.exit(main())
