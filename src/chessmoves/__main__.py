import sys

from chessmoves.app import main

sys.exit(main())
