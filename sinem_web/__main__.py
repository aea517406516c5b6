"""Run the web server with ``python -m sinem_web``."""

import sys

from sinem_web.web_server import main

if __name__ == "__main__":
    sys.exit(main())
