# src/currconv/__main__.py
"""Allow running as ``python -m currconv``."""
import sys

from currconv.app import main

sys.exit(main())
