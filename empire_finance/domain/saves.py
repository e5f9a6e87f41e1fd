"""Save-slot bookkeeping"""

from datetime import datetime, timezone
from typing import Container, Iterable, List

from empire_finance.domain.exceptions import InvalidSlotName, ProtectedSaveSlot
from empire_finance.domain.models import GameSnapshot, SaveSlot
from empire_finance.domain.results import Result

MAIN_SLOT_ID = "main"
MAIN_SLOT_NAME = "Main Save"
MAX_SLOT_NAME_LENGTH = 40


def new_slot_id(now: datetime | None = None, taken: Container[str] = ()) -> str:
    """
    Slot ids for user-created saves are millisecond timestamps.

    Ids already in `taken` are skipped by bumping the timestamp, so two saves
    in the same millisecond get distinct slots.
    """
    now = now or datetime.now(timezone.utc)
    candidate = int(now.timestamp() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def validate_slot_name(name: str) -> Result[str]:
    name = name.strip()
    if not name or len(name) > MAX_SLOT_NAME_LENGTH:
        return Result.failure(
            InvalidSlotName(
                f"Save name must be 1-{MAX_SLOT_NAME_LENGTH} characters",
                bound=MAX_SLOT_NAME_LENGTH,
                actual=len(name),
            )
        )
    return Result.success(name)


def check_deletable(slot_id: str) -> Result[str]:
    if slot_id == MAIN_SLOT_ID:
        return Result.failure(ProtectedSaveSlot("The main save slot cannot be deleted"))
    return Result.success(slot_id)


def net_worth(snapshot: GameSnapshot) -> float:
    """Cash plus the owned share of every company's market value"""
    return snapshot.cash + sum(c.market_value * c.shares_owned / 100 for c in snapshot.companies)


def describe_save(slot_id: str, name: str, snapshot: GameSnapshot, now: datetime | None = None) -> SaveSlot:
    return SaveSlot(
        id=slot_id,
        name=name,
        last_played=now or datetime.now(timezone.utc),
        net_worth=net_worth(snapshot),
        companies=len(snapshot.companies),
        play_time=snapshot.play_time,
    )


def order_slots(slots: Iterable[SaveSlot]) -> List[SaveSlot]:
    """Main slot first, then most recently played"""
    slots = list(slots)
    main = [s for s in slots if s.id == MAIN_SLOT_ID]
    others = sorted((s for s in slots if s.id != MAIN_SLOT_ID), key=lambda s: s.last_played, reverse=True)
    return main + others
