import sys

from netbg.main import main

sys.exit(main())
