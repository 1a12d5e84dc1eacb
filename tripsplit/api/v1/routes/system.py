from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import get_db
from tripsplit.schemas.system import DbHealthOut, HealthOut, MetricsOut
from tripsplit.services.system_services import count_rows, liveness, probe_database

router = APIRouter(tags=["system"])

@router.get("/health", response_model=HealthOut)
async def health():
    return liveness()

@router.get("/health/db", response_model=DbHealthOut, response_model_exclude_none=True)
async def database_health():
    return await probe_database()

@router.get("/metrics", response_model=MetricsOut)
async def row_counts(db: AsyncSession = Depends(get_db)):
    return await count_rows(db)
