import sys

from jobo.cli import main

sys.exit(main())
