from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import get_db
from tripsplit.core.dependencies import AuthUser, get_current_user
from tripsplit.schemas.member import MemberAdd, MemberEnvelope, MembersEnvelope
from tripsplit.services.member_services import list_members, add_members

router = APIRouter()

@router.get("/{event_id}/members", response_model=MembersEnvelope)
async def event_members(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return {"members": await list_members(db, event_id, user.id)}

@router.post(
    "/{event_id}/members",
    response_model=MemberEnvelope | MembersEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def add_event_members(
    event_id: str,
    data: MemberAdd,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    members = await add_members(db, data, event_id, user.id)

    # batch requests get the list back, single requests the member
    if data.members is not None:
        return MembersEnvelope(members=members)
    return MemberEnvelope(member=members[0])
