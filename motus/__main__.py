import sys

from motus.cli import main

sys.exit(main())
