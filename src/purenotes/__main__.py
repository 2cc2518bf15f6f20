# SPDX-License-Identifier: MIT

from purenotes import main

main()
