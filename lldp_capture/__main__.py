import sys

from lldp_capture.cli import main

sys.exit(main())
