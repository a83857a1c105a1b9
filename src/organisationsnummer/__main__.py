import sys

from organisationsnummer.cli import main

sys.exit(main())
