"""
FastAPI main application
Classroom Peer Evaluation Server

Modular architecture with separated API routers in peer_eval/api/:
- health.py: Health check and system status
- auth.py: Admin and peer login
- admin.py: Roster/team uploads and reset
- team.py: Team and peer listings
- session.py: Live session read (peer polling) and update (admin)
- evaluation.py: Evaluation submission and listing
- stream.py: Video SDK token issuing

All routers access shared state via peer_eval.state. Nothing is persisted.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from peer_eval import __version__, state
from peer_eval.config import load_settings
from peer_eval.services.accounts import seed_admin

# Import all API routers
from peer_eval.api import health, auth, admin, team, session, evaluation, stream


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: load settings and seed the admin account
    try:
        state.SETTINGS = load_settings()
        seed_admin(state.SETTINGS)
        logger.info(f"✅ Server started (poll interval {state.SETTINGS.poll_interval}s)")
    except Exception as e:
        logger.error(f"❌ Failed to load settings: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Peer Evaluation Server",
    description="Live presentation staging and rubric-based peer evaluation",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Login (POST /api/admin/login, /api/peer/login)
app.include_router(auth.router, prefix="/api")

# Admin uploads (POST /api/admin/upload-peers, /api/admin/upload-teams, /api/admin/reset)
app.include_router(admin.router, prefix="/api")

# Listings (GET /api/teams, /api/peers)
app.include_router(team.router, prefix="/api")

# Session (GET/PATCH /api/session)
app.include_router(session.router, prefix="/api")

# Evaluations (POST/GET /api/evaluations)
app.include_router(evaluation.router, prefix="/api")

# Video SDK tokens (POST /api/stream/token)
app.include_router(stream.router, prefix="/api")


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
