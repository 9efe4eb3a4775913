import os
from dotenv import load_dotenv

load_dotenv()


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def get_show_hints() -> bool:
    return os.getenv("REVERSI_SHOW_HINTS", "0") != "0"


def get_square_size() -> int:
    return int(os.getenv("REVERSI_SQUARE_SIZE", "75"))
