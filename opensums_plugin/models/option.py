"""Option model for persisting named plugin options."""
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String
from opensums_plugin.extensions import db


class Option(db.Model):
    """A single named option, shared by every plugin using the same database."""

    __tablename__ = "options"

    option_id = Column(Integer, primary_key=True, autoincrement=True)
    option_name = Column(String(191), unique=True, nullable=False, index=True)
    option_value = Column(JSON, nullable=True)
    autoload = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Option {self.option_name}>"
