"""Save-slot endpoints - list, create, overwrite, load, delete"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from empire_finance.api.dependencies import get_settings
from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import (
    SaveDetailResponse,
    SaveListResponse,
    SaveRequest,
    SaveSlotSchema,
)
from empire_finance.config import Settings
from empire_finance.domain.models import GameSnapshot
from empire_finance.domain.saves import (
    MAIN_SLOT_ID,
    check_deletable,
    describe_save,
    new_slot_id,
    order_slots,
    validate_slot_name,
)
from empire_finance.infrastructure.database.repositories import SaveSlotRepository, to_domain
from empire_finance.infrastructure.database.session import get_db

router = APIRouter()


def _slot_schema(record) -> SaveSlotSchema:
    return SaveSlotSchema.from_domain(to_domain(record), deletable=record.id != MAIN_SLOT_ID)


def _store(slot_id: str, body: SaveRequest, request: Request, repo: SaveSlotRepository):
    name = resolve(validate_slot_name(body.name), request, "save_game", slot_id=slot_id)
    snapshot = GameSnapshot(
        cash=body.cash,
        companies=[c.to_domain() for c in body.companies],
        play_time=body.play_time,
    )
    return repo.save_slot(describe_save(slot_id, name, snapshot), body.state)


@router.get("/saves", response_model=SaveListResponse)
def list_saves(
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """All save slots; the main slot is always present and listed first"""
    repo = SaveSlotRepository(db)
    repo.ensure_main_slot()
    db.commit()

    slots = order_slots(to_domain(r) for r in repo.list_slots(limit=config.save_slot_limit))
    return SaveListResponse(
        slots=[SaveSlotSchema.from_domain(s, deletable=s.id != MAIN_SLOT_ID) for s in slots]
    )


@router.post("/saves", response_model=SaveSlotSchema)
def create_save(
    body: SaveRequest,
    request: Request,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """Save into a new slot keyed by the current timestamp"""
    repo = SaveSlotRepository(db)
    if repo.count_slots() >= config.save_slot_limit:
        raise HTTPException(status_code=409, detail="Save slot limit reached")

    record = _store(new_slot_id(taken=repo.slot_ids()), body, request, repo)
    db.commit()
    return _slot_schema(record)


@router.put("/saves/{slot_id}", response_model=SaveSlotSchema)
def overwrite_save(slot_id: str, body: SaveRequest, request: Request, db: Session = Depends(get_db)):
    """Overwrite an existing slot; the main slot is created on its first save"""
    repo = SaveSlotRepository(db)
    if slot_id != MAIN_SLOT_ID and repo.get_slot(slot_id) is None:
        raise HTTPException(status_code=404, detail="Save slot not found")

    record = _store(slot_id, body, request, repo)
    db.commit()
    return _slot_schema(record)


@router.get("/saves/{slot_id}", response_model=SaveDetailResponse)
def load_save(slot_id: str, db: Session = Depends(get_db)):
    record = SaveSlotRepository(db).get_slot(slot_id)
    if not record:
        raise HTTPException(status_code=404, detail="Save slot not found")

    return SaveDetailResponse(slot=_slot_schema(record), state=record.state)


@router.delete("/saves/{slot_id}")
def delete_save(slot_id: str, request: Request, db: Session = Depends(get_db)):
    resolve(check_deletable(slot_id), request, "delete_save", slot_id=slot_id)

    if not SaveSlotRepository(db).delete_slot(slot_id):
        raise HTTPException(status_code=404, detail="Save slot not found")

    db.commit()
    return {"deleted": slot_id}
