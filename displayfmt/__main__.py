import sys

from displayfmt.cli import main

sys.exit(main())
