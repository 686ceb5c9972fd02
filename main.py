import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# quiet HTTP library debug logs
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ routers
from routers import (
    advice, auth, grades, grades_dashboard, study_config, subjects,
)

from services.grade_store import SimulationGradeStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    # simulated grades live only as long as the process
    app.state.simulation_store = SimulationGradeStore()
    logger.info("%s %s started (env=%s)", settings.APP_TITLE, settings.APP_VERSION, settings.ENV)
    yield
    app.state.simulation_store.clear()


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ✅ CORS (Next.js frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ latency header X-Latency-Ms
app.add_middleware(TimingMiddleware)

# ✅ global JSON error format
add_error_handlers(app)

# ✅ /v1 routers
app.include_router(auth.router,             prefix="/v1")
app.include_router(study_config.router,     prefix="/v1")
app.include_router(subjects.router,         prefix="/v1")
app.include_router(grades.router,           prefix="/v1")
app.include_router(grades_dashboard.router, prefix="/v1")
app.include_router(advice.router,           prefix="/v1")


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - {settings.APP_DESCRIPTION}"}
