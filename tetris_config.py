
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "MIN_CELL_SIZE": 10,
    "PANEL_W": 200,
    "MARGIN": 16,
    "FPS": 60,
    "BASE_DROP_INTERVAL_MS": 1000,
    "DROP_INTERVAL_STEP_MS": 50,
    "MIN_DROP_INTERVAL_MS": 100,
    "LINES_PER_LEVEL": 10,
    "KEY_REPEAT_DELAY_MS": 150,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
