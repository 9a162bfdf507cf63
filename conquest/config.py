"""
Single place for default game configuration.
Values can be overridden through environment variables.
"""

import os

# Units every player has to place before the game leaves the placement phase
STARTING_UNITS = int(os.getenv("CONQUEST_STARTING_UNITS", "35"))

# Sides on the default RandomDice
DICE_SIDES = int(os.getenv("CONQUEST_DICE_SIDES", "6"))

# Level used by configure_logging() when none is given
LOG_LEVEL = os.getenv("CONQUEST_LOG_LEVEL", "WARNING")
