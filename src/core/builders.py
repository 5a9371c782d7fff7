import random
from typing import Optional

from src.core.config import FortuneConfig
from src.storage.database import QuoteDatabase, locate_database


def build_database(config: FortuneConfig) -> QuoteDatabase:
    path = locate_database(config.filename, config.program_path)
    return QuoteDatabase(path)


def build_rng(seed: Optional[int] = None) -> random.Random:
    # without a seed Random() pulls its state from os.urandom
    return random.Random(seed)
