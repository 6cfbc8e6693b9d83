import sys

from hug_grid.cli import main

sys.exit(main())
