# SPDX-License-Identifier: MIT

from mensual import main

main()
