import sys

from digitcode.cli import main

sys.exit(main())
