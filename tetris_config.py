
CONFIG = {
    "CELL_SIZE": 30,
    "TICK_MS": 400,
    "ROTATE_CW": True,
    "HARD_DROP_LOCKS": False,
    "SPAWN_ROTATIONS": True,
    "SCORE_MODE": "row",
    "LINE_SCORE": 100,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
