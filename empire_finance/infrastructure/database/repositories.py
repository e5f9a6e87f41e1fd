"""Data access layer for save slots"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set

from sqlalchemy.orm import Session

from empire_finance.domain.models import SaveSlot
from empire_finance.domain.saves import MAIN_SLOT_ID, MAIN_SLOT_NAME
from empire_finance.infrastructure.database.models import SaveSlotRecord


def to_domain(record: SaveSlotRecord) -> SaveSlot:
    return SaveSlot(
        id=record.id,
        name=record.name,
        last_played=record.last_played,
        net_worth=record.net_worth,
        companies=record.companies,
        play_time=record.play_time,
    )


class SaveSlotRepository:
    """Repository for save slots"""

    def __init__(self, db: Session):
        self.db = db

    def ensure_main_slot(self) -> SaveSlotRecord:
        """The main slot always exists, even before the first save"""
        record = self.get_slot(MAIN_SLOT_ID)
        if record is None:
            record = SaveSlotRecord(
                id=MAIN_SLOT_ID,
                name=MAIN_SLOT_NAME,
                last_played=datetime.now(timezone.utc),
            )
            self.db.add(record)
            self.db.flush()
        return record

    def list_slots(self, limit: int = 20) -> List[SaveSlotRecord]:
        """Fetch slots, the main slot first and then the most recently played"""
        main = self.get_slot(MAIN_SLOT_ID)
        head = [main] if main is not None else []
        others = (
            self.db.query(SaveSlotRecord)
            .filter(SaveSlotRecord.id != MAIN_SLOT_ID)
            .order_by(SaveSlotRecord.last_played.desc())
            .limit(max(limit - len(head), 0))
            .all()
        )
        return head + others

    def count_slots(self) -> int:
        return self.db.query(SaveSlotRecord).count()

    def slot_ids(self) -> Set[str]:
        return {row.id for row in self.db.query(SaveSlotRecord.id).all()}

    def get_slot(self, slot_id: str) -> Optional[SaveSlotRecord]:
        return self.db.query(SaveSlotRecord).filter(SaveSlotRecord.id == slot_id).first()

    def save_slot(self, slot: SaveSlot, state: Optional[Dict[str, Any]] = None) -> SaveSlotRecord:
        """Create or overwrite a slot"""
        record = self.get_slot(slot.id)
        if record is None:
            record = SaveSlotRecord(id=slot.id)
            self.db.add(record)

        record.name = slot.name
        record.last_played = slot.last_played
        record.net_worth = slot.net_worth
        record.companies = slot.companies
        record.play_time = slot.play_time
        record.state = state

        self.db.flush()
        return record

    def delete_slot(self, slot_id: str) -> bool:
        record = self.get_slot(slot_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True
