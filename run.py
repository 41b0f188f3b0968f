#!/usr/bin/env python
"""Float GA launcher

Run ``python run.py --help`` for the available options.
"""

import sys

from float_ga.cli import main


if __name__ == '__main__':
    sys.exit(main())
