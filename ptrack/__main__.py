import sys

from ptrack.cli import main

sys.exit(main())
