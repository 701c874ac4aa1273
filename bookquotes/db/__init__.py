from .models import Base
from .engine import make_engine, init_db

__all__ = ["Base", "make_engine", "init_db"]
