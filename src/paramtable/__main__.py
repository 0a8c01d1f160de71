import sys

from paramtable.main import main

sys.exit(main())
