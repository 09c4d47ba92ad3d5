"""Allow ``python -m tikengine``."""

import sys

from tikengine.cli import main

sys.exit(main())
