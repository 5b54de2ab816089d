import sys

from _dfascan.cli import main

sys.exit(main())
