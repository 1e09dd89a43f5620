import sys

from fluid_tailwind.cli import main

sys.exit(main())
