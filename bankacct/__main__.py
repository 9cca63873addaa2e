"""Allow ``python -m bankacct``."""

import sys

from bankacct.app import main

sys.exit(main())
