import sys

from bilichat.cli.main import main

sys.exit(main())
