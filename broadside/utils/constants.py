"""Game configuration constants."""

# Grid dimensions (square board)
BOARD_SIZE = 10

# Required vessel lengths, placed in this order by each player
FLEET_COMPOSITION = (2, 3, 3, 4, 5)

# Console input
MAX_INPUT_ATTEMPTS = 10  # Re-prompts before giving up on a single value

# Server
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 3000
