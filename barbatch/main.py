# barbatch API Main Entry Point
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .settings import settings
from .routers.ready import router as ready_router
from .routers.cocktails import router as cocktails_router
from .routers.ingredients import router as ingredients_router
from .routers.liquor_prices import router as liquor_prices_router
from .routers.events import router as events_router
from .routers.batch import router as batch_router
from .routers.dev import router as dev_router

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("barbatch")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("barbatch API ready")
    yield


# Rate limiter (per-IP)
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

app = FastAPI(title="barbatch API", version="0.1.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(cocktails_router, prefix="/api", tags=["cocktails"])
app.include_router(ingredients_router, prefix="/api", tags=["ingredients"])
app.include_router(liquor_prices_router, prefix="/api", tags=["prices"])
app.include_router(events_router, prefix="/api", tags=["events"])
app.include_router(batch_router, prefix="/api", tags=["batch"])
app.include_router(dev_router, prefix="/api", tags=["dev"])
