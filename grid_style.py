# Nonogram Grid Style Definitions

# Cell States
COLOR_FILLED = (0, 0, 0)
COLOR_EMPTY = (255, 255, 255)

# Lines and clue numbers
COLOR_GRID_LINES = (136, 136, 136)  # #888888, also used for clue text

# Application
COLOR_BG = (0, 0, 0)
COLOR_HELP_TEXT = (220, 220, 220)
