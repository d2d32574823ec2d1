"""Allow `python -m forumadmin`."""
import sys

from forumadmin.main import main

sys.exit(main())
