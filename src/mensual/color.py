# SPDX-License-Identifier: MIT

# Text color used when the host hides the widget background
NO_BACKGROUND_TEXT_COLOR = "white"

HEADER_COLOR = "dark_orange"
SUB_HEADER_COLOR = "sandy_brown"
POLICY_COLOR = "plum1"
ERROR_COLOR = "red"
