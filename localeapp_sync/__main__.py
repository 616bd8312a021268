import sys

from localeapp_sync.cli import main

sys.exit(main())
