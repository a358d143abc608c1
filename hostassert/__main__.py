# SPDX-License-Identifier: MIT
from hostassert.cli.app import main

main()
