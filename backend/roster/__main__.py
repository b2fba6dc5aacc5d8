import sys

from roster.server import main

sys.exit(main())
