"""Word ladder game constants and default settings."""

# Every word in the shipped game has this many letters
WORD_LENGTH = 5

# Rows a player may fill before the ladder must reach the target
MAX_ATTEMPTS = 5

# Shortest-path distance bounds for generated puzzles
MIN_DISTANCE = 3
MAX_DISTANCE = 5

# Random start words tried before falling back to a fixed pair
MAX_GENERATION_ATTEMPTS = 50

# Seconds an error message stays visible after a rejected move
ERROR_DISPLAY_SECONDS = 2.0

# Letters that make a target word feel unusual
RARE_LETTERS = "jqxzvk"

DEFAULT_GUESS_FILE = "guess_words.txt"
DEFAULT_SEED_FILE = "seed_words.txt"
