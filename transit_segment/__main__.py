import sys

from transit_segment.cli import main

sys.exit(main())
