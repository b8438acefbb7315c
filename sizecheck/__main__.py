import sys

from sizecheck.cli import main

sys.exit(main())
