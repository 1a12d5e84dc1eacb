from datetime import datetime
from typing import List
from pydantic import Field, model_validator
from tripsplit.schemas.common import InModel, OutModel

class MemberAdd(InModel):
    """Single member (`name`, optional `userId`) or a batch of names (`members`)."""
    name: str | None = Field(default=None, min_length=1)
    user_id: str | None = None
    members: List[str] | None = None

    @model_validator(mode="after")
    def check_shape(self):
        if self.members is not None:
            if any(not n.strip() for n in self.members):
                raise ValueError("Member names must not be empty")
        elif not self.name or not self.name.strip():
            raise ValueError("Member name is required")
        return self

class MemberOut(OutModel):
    id: str
    event_id: str
    name: str
    user_id: str | None = None
    created_at: datetime | None = None

class MemberEnvelope(OutModel):
    member: MemberOut

class MembersEnvelope(OutModel):
    members: List[MemberOut]
