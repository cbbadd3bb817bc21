"""Fixed timing and key values for the countdown."""

# Seconds shown before the first rep
INTRO_SECONDS = 3

# Delay between two countdown frames
TICK_SECONDS = 1.0

# Delay between two keyboard polls while paused
PAUSE_POLL_SECONDS = 0.5

ESC = 27
CTRL_C = 3
EXIT_KEYS = frozenset({ESC, CTRL_C})

# Rich style of the remaining-seconds line
ACCENT_STYLE = "blue"

# Max bytes read from stdin per os.read call
READ_CHUNK_SIZE = 1024
