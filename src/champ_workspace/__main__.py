import sys

from champ_workspace.cli import main

sys.exit(main())
