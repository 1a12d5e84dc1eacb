from tripsplit.schemas.common import OutModel

class HealthOut(OutModel):
    status: str

class DbHealthOut(OutModel):
    db: bool
    message: str | None = None
    error: str | None = None

class MetricsOut(OutModel):
    events: int
    members: int
    transactions: int
