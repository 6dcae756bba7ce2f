import sys

from flowcsv.cli import main

sys.exit(main())
