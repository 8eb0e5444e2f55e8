import sys

from snake_apple.app import main

sys.exit(main())
