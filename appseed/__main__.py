import sys
from appseed.cli import main

sys.exit(main())
