import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debtplan import __version__
from debtplan.config import settings
from debtplan.api.routes import currencies, debts, health, scenarios

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info(
        "Payoff engine ready: iteration cap %d months, default currency %s",
        settings.MAX_AMORTIZATION_MONTHS, settings.DEFAULT_CURRENCY,
    )
    yield


app = FastAPI(title="Debt Payoff Engine", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(debts.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")
app.include_router(currencies.router, prefix="/api")
