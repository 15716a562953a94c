# src/blackcore/__main__.py
"""Allow running the converter with `python -m blackcore`."""
import sys

from blackcore.app import main

sys.exit(main())
