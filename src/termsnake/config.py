# Grid size in cells. Row/column 0 and row/column WIDTH/HEIGHT are border.
WIDTH, HEIGHT = 20, 20

# How long one input poll blocks before the loop goes around again.
POLL_INTERVAL_MS = 1000

START_FOOD = (5, 5)

QUIT_KEY = "q"

BORDER_GLYPH = "#"
SNAKE_GLYPH = "O"
FOOD_GLYPH = "*"

SCORE_FORMAT = "Score: {score}"
GAME_OVER_TEXT = "Game over! Press 'q' to quit."
