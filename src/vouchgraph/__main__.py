import sys

from vouchgraph.cli.main import main

sys.exit(main())
