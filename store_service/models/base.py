from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func

# Верхняя граница для целочисленных ID (BIGINT / SQLite INTEGER)
MAX_ID = 2 ** 63 - 1


class AuditMixin:
    """Идентификатор, временные метки и отметка мягкого удаления"""

    id = Column(Integer, primary_key=True, index=True)

    # Временные метки
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime, nullable=True, index=True)  # NULL = запись активна

    def soft_delete(self):
        self.deleted_at = func.now()
