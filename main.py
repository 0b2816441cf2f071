import sys
from hcheck.cli import main

sys.exit(main())
