"""Allow `python -m trimatrix`."""
import sys

from trimatrix.cli import main

sys.exit(main())
