import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from tripsplit.core.config import settings
from tripsplit.core.db_check import wait_for_db
from tripsplit.api.v1.routes.system import router as system_router
from tripsplit.api.v1.routes.event import router as event_router
from tripsplit.api.v1.routes.member import router as member_router
from tripsplit.api.v1.routes.transaction import router as transaction_router
from tripsplit.api.v1.routes.balance import router as balance_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Tripsplit Backend")
    await wait_for_db()
    yield
    logger.info("Shutting down Tripsplit Backend")


app = FastAPI(title="Tripsplit Backend", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
async def root():
    return {"message": "Tripsplit Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(event_router, prefix="/api/v1/events")
app.include_router(member_router, prefix="/api/v1/events")
app.include_router(transaction_router, prefix="/api/v1/events")
app.include_router(balance_router, prefix="/api/v1/events")
