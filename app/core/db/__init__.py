# Models import Base from here; the model modules themselves are imported by
# app.main and alembic/env.py so their tables are registered on Base.metadata.

from app.core.db.base import Base, BaseModel

__all__ = [
    "Base",
    "BaseModel",
]
