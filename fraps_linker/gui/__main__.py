import sys

from .gui_entry import main

sys.exit(main())
