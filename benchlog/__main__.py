import sys

from benchlog.cli import main

sys.exit(main())
