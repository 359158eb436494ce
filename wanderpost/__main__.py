"""Allows `python -m wanderpost TOPIC`."""

import sys

from wanderpost.cli import main

sys.exit(main())
