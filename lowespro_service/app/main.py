import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import engine, Base
from shared.exception_handler import setup_exception_handlers

from .models.procurement import vendors, representatives, sequence_counters
from .models.catalog import categories, services, brands, brand_templates
from .models.customers import pro_customers, trades
from .router.procurement import vendor_router, representative_router
from .router.catalog import category_router, service_router, brand_router, brand_template_router
from .router.customers import pro_customer_router, trade_router
from .router.common import system_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create all tables
    Base.metadata.create_all(bind=engine)
    logger.info("LowesPro service started (%s)", settings.ENVIRONMENT)
    yield


app = FastAPI(title="LowesPro Service API", lifespan=lifespan)


# bare OPTIONS (no CORS preflight headers) still answers 200; registered before
# CORSMiddleware so real preflights are handled by it first
@app.middleware("http")
async def answer_options(request: Request, call_next):
    if request.method == "OPTIONS" and request.url.path.startswith("/api"):
        return Response(status_code=200)
    return await call_next(request)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(vendor_router.router)
app.include_router(representative_router.router)
app.include_router(category_router.router)
app.include_router(service_router.router)
app.include_router(brand_router.router)
app.include_router(brand_template_router.router)
app.include_router(pro_customer_router.router)
app.include_router(trade_router.router)
app.include_router(system_router.router)
