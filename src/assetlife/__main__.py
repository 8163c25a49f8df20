import sys

from assetlife.main import main

sys.exit(main())
