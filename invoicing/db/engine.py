# invoicing/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from invoicing.config import get_settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    database_url = get_settings().database_url
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Requests are served from a thread pool.
        connect_args["check_same_thread"] = False
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(database_url, future=True, connect_args=connect_args)
