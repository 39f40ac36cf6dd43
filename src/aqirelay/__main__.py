import sys

from aqirelay.cli import main

sys.exit(main())
