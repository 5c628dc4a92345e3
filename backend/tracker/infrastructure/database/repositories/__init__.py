from .sqlalchemy_row_store import SQLAlchemyRowStore

__all__ = ["SQLAlchemyRowStore"]
