import sys

from f1topic.cli import main

sys.exit(main())
