"""Interfaces the engine's callers depend on; implemented in infrastructure"""

from datetime import datetime
from typing import Dict, List, Protocol

from spendwise.domain.models import Bill, DateRange, Transaction


class LedgerStore(Protocol):
    """Read-side storage queries for one user's ledger"""

    def get_transactions(self, user_id: str, date_range: DateRange) -> List[Transaction]:
        """All transactions for the user whose day falls in date_range (unordered)"""
        ...

    def get_bills(self, user_id: str) -> List[Bill]:
        ...

    def get_card_names(self, user_id: str) -> Dict[str, str]:
        ...

    def get_category_names(self, user_id: str) -> Dict[str, str]:
        ...


class Clock(Protocol):
    def now(self) -> datetime:
        ...
