import sys

from minilex.cli import main

sys.exit(main())
