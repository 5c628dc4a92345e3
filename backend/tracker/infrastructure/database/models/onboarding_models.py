"""SQLAlchemy ORM models for the five onboarding tables.

Columns mirror the spreadsheet layout: every cell is text, empty string
meaning "no value".
"""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.infrastructure.database.base import Base


class ClientModel(Base):
    """ORM model: maps to the 'Clients' table."""

    __tablename__ = "Clients"

    client_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    created_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="not_started")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<ClientModel(client_id={self.client_id}, status='{self.status}')>"


class ClientPlatformModel(Base):
    """ORM model: maps to the 'ClientPlatforms' table."""

    __tablename__ = "ClientPlatforms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="not_started")
    started_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    completed_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")

    __table_args__ = (
        Index("ix_client_platforms_client", "client_id", "platform"),
    )


class StepProgressModel(Base):
    """ORM model: maps to the 'StepProgress' table."""

    __tablename__ = "StepProgress"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    step_id: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="completed")
    completed_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    completed_by: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    __table_args__ = (
        Index("ix_step_progress_scope", "client_id", "platform", "step_id"),
    )


class ChecklistProgressModel(Base):
    """ORM model: maps to the 'ChecklistProgress' table."""

    __tablename__ = "ChecklistProgress"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    step_id: Mapped[str] = mapped_column(String(100), nullable=False)
    item_index: Mapped[str] = mapped_column(String(8), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="completed")
    completed_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    completed_by: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    __table_args__ = (
        Index("ix_checklist_progress_scope", "client_id", "platform", "step_id"),
    )


class NoteModel(Base):
    """ORM model: maps to the 'Notes' table."""

    __tablename__ = "Notes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    step_id: Mapped[str] = mapped_column(String(100), nullable=False)
    item_index: Mapped[str] = mapped_column(String(8), nullable=False, default="")
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    updated_at: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    updated_by: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    __table_args__ = (
        Index("ix_notes_scope", "client_id", "platform", "step_id"),
    )
