"""Saved events API router.

Endpoints:
- GET /api/events - List saved events, newest event date first
- POST /api/events - Save an event's drink menu
- DELETE /api/events/{id} - Delete an event (password-gated)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..deps import check_delete_password
from ..models import SavedEvent
from ..schemas import DeleteRequest, EventCreate, EventListOut, EventOut

router = APIRouter()
logger = logging.getLogger("barbatch.events")


@router.get("/events", response_model=EventListOut)
def list_events(db: Session = Depends(get_db)):
    events = db.execute(
        select(SavedEvent).order_by(SavedEvent.event_date.desc(), SavedEvent.id.desc())
    ).scalars().all()
    return EventListOut(events=[EventOut.model_validate(e) for e in events])


@router.post("/events", response_model=EventOut, status_code=201)
def create_event(body: EventCreate, db: Session = Depends(get_db)):
    event = SavedEvent(
        name=body.name,
        event_date=body.event_date,
        recipes=[line.model_dump() for line in body.recipes],
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info(f"Saved event {event.id} ('{event.name}') with {len(body.recipes)} recipes")
    return EventOut.model_validate(event)


@router.delete("/events/{event_id}")
def delete_event(
    event_id: int,
    body: Optional[DeleteRequest] = None,
    db: Session = Depends(get_db),
):
    check_delete_password(body.password if body else None)

    event = db.get(SavedEvent, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    db.delete(event)
    db.commit()
    return {"success": True}
