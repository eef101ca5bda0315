import sys

from federation_sync.cli import main

sys.exit(main())
