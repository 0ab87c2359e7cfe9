"""Data access layer - read queries backing the dashboard"""

from datetime import datetime, time, timedelta
from decimal import Decimal
from typing import Dict, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from spendwise.infrastructure.database import models
from spendwise.domain.exceptions import InvalidRecurrenceError, StorageError
from spendwise.domain.models import Bill, DateRange, Frequency, RecurrenceDescriptor, Transaction


class SqlLedgerStore:
    """LedgerStore backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def get_transactions(self, user_id: str, date_range: DateRange) -> List[Transaction]:
        """
        Fetch expenses whose day falls in date_range.

        Raises:
            StorageError: On database errors
        """
        # Inclusive day range -> half-open instant range
        start = datetime.combine(date_range.start, time.min)
        end = datetime.combine(date_range.end + timedelta(days=1), time.min)
        try:
            rows = (
                self.db.query(models.Expense)
                .filter(models.Expense.user_id == user_id)
                .filter(models.Expense.occurred_at >= start)
                .filter(models.Expense.occurred_at < end)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load expenses: {e}") from e

        return [
            Transaction(
                amount=Decimal(row.amount),
                occurred_at=row.occurred_at,
                category_id=row.category_id,
                card_id=row.card_id,
            )
            for row in rows
        ]

    def get_bills(self, user_id: str) -> List[Bill]:
        """Fetch all bills for a user with their recurrence rules"""
        try:
            rows = self.db.query(models.Bill).filter(models.Bill.user_id == user_id).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load bills: {e}") from e

        return [
            Bill(
                bill_id=row.id,
                name=row.name,
                amount=Decimal(row.amount),
                recurrence=RecurrenceDescriptor(
                    due_day_of_month=row.due_day,
                    frequency=_frequency(row),
                    last_paid_at=row.last_paid_at,
                    reminder_lead_days=row.reminder_days,
                ),
            )
            for row in rows
        ]

    def get_card_names(self, user_id: str) -> Dict[str, str]:
        try:
            rows = self.db.query(models.Card.id, models.Card.name).filter(models.Card.user_id == user_id).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load cards: {e}") from e
        return {card_id: name for card_id, name in rows}

    def get_category_names(self, user_id: str) -> Dict[str, str]:
        try:
            rows = (
                self.db.query(models.Category.id, models.Category.name)
                .filter(models.Category.user_id == user_id)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load categories: {e}") from e
        return {category_id: name for category_id, name in rows}


def _frequency(row: models.Bill) -> Frequency:
    try:
        return Frequency(row.frequency)
    except ValueError as e:
        raise InvalidRecurrenceError(f"Bill {row.id} has unsupported frequency {row.frequency!r}") from e
