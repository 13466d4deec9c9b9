# game_scores_service.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from .config import settings
from .core.events import startup_event, shutdown_event
from .core.handlers import register_error_handlers
from .routes import games, health, players

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool on startup and close it on shutdown"""
    await startup_event()
    yield
    await shutdown_event()

# --- FastAPI App ---
app = FastAPI(
    default_response_class=ORJSONResponse,
    title="Game Scores Service",
    description="CRUD and reporting API over games, players and their scores, backed by PostgreSQL",
    version="1.0.0",
    lifespan=lifespan
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(games.router)
app.include_router(players.router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
