from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import get_db
from tripsplit.core.dependencies import AuthUser, get_current_user
from tripsplit.schemas.event import EventCreate, EventUpdate, EventEnvelope, EventDetailEnvelope, EventsEnvelope
from tripsplit.services.event_services import create_event, list_events, get_event, update_event, delete_event

router = APIRouter()

@router.get("/", response_model=EventsEnvelope)
async def my_events(db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return {"events": await list_events(db, user.id)}

@router.post("/", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
async def create_new_event(
    data: EventCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return {"event": await create_event(db, data, user.id)}

@router.get("/{event_id}", response_model=EventDetailEnvelope)
async def fetch(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return {"event": await get_event(db, event_id, user.id)}

@router.patch("/{event_id}", response_model=EventEnvelope)
async def edit(
    event_id: str,
    data: EventUpdate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return {"event": await update_event(db, data, event_id, user.id)}

@router.delete("/{event_id}")
async def remove(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await delete_event(db, event_id, user.id)
