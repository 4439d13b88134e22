"""Allow ``python -m ssc_bench``."""

import sys

from ssc_bench.cli import main

sys.exit(main())
