import sys

from typesmith.cli import main

sys.exit(main())
