import sys

from rawtables.cli import main

sys.exit(main())
