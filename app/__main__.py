"""Main password policy module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys

from cli import main

if __name__ == "__main__":
    sys.exit(main())
