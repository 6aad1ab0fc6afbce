import sys

from connectfour.interfaces.cli import main

sys.exit(main())
