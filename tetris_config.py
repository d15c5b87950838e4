COLS, ROWS = 10, 16

CONFIG = {
    "CELL_SIZE": 20,
    "FALL_PERIOD_S": 1.0,
    "BOARD_COUNT": 2,
    "SESSION_OVER": "any",   # "any" board topping out ends the session, or "all"
    "SEED": None,
    "VERBOSE": False,
}
