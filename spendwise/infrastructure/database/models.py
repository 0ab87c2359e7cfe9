"""SQLAlchemy ORM models for the user's ledger"""

import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class Card(Base):
    """Payment card owned by a user"""

    __tablename__ = "card"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    last_four_digits = Column(String(4), nullable=False)
    card_type = Column(Text, nullable=False, default="credit")  # credit | debit | prepaid
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Category(Base):
    """Spending category"""

    __tablename__ = "category"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Expense(Base):
    """Single recorded expense"""

    __tablename__ = "expense"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    store = Column(Text, nullable=False, default="")
    occurred_at = Column(DateTime, nullable=False, index=True)
    card_id = Column(String(36), nullable=False)
    category_id = Column(String(36), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Bill(Base):
    """Recurring bill with its recurrence rule"""

    __tablename__ = "bill"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    due_day = Column(Integer, nullable=False)
    frequency = Column(Text, nullable=False, default="monthly")  # monthly | quarterly | yearly
    reminder_days = Column(Integer, nullable=False, default=0)
    last_paid_at = Column(DateTime, nullable=True)
    category_id = Column(String(36), nullable=True)
    card_id = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
