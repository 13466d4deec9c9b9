from typing import List
from fastapi import APIRouter, Depends
from ..config import settings
from ..core.errors import ApiError, InternalError, NotFoundError
from ..database import DatabaseManager, get_db
from ..models.game import Game, GameInput, GameUpdate, GenrePlays
from ..models.params import GameId
from ..models.response import SuccessResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter(tags=["games"])

@router.get("/games", response_model=SuccessResponse[List[Game]])
async def get_games(db: DatabaseManager = Depends(get_db)):
    """Fetch all games ordered by id."""
    try:
        games = await db.games.list_games()
        message = "Successfully fetched games!" if games else "No registered games!"
        return SuccessResponse(message=message, data=games)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching games: {e}")
        raise InternalError(e)

@router.post("/games", response_model=SuccessResponse[Game], status_code=201)
async def create_game(data: GameInput, db: DatabaseManager = Depends(get_db)):
    """
    Create a new game.

    - **title**: 2-50 characters
    - **genre**: 2-20 characters
    """
    try:
        game = await db.games.create_game(data)
        logger.info(f"Created game {game.id} ({game.title})")
        return SuccessResponse(message=f"Successfully added {game.title} to games list", data=game)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating game: {e}")
        raise InternalError(e)

# Registered before /games/{id}
@router.get("/games/genre/popular", response_model=SuccessResponse[List[GenrePlays]])
async def get_popular_genres(db: DatabaseManager = Depends(get_db)):
    """Top genres by number of recorded plays."""
    try:
        genres = await db.games.popular_genres(settings.REPORT_LIMIT)
        if not genres:
            raise NotFoundError("No games have been played yet")
        return SuccessResponse(message=f"Successfully fetched top {settings.REPORT_LIMIT} game genres!", data=genres)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching popular genres: {e}")
        raise InternalError(e)

@router.get("/games/{id}", response_model=SuccessResponse[Game])
async def get_game(id: GameId, db: DatabaseManager = Depends(get_db)):
    try:
        game = await db.games.get_game(id)
        if game is None:
            raise NotFoundError(f"No game with id: {id} found!")
        return SuccessResponse(message="Successfully fetched game!", data=game)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching game {id}: {e}")
        raise InternalError(e)

@router.put("/games/{id}", response_model=SuccessResponse[Game])
async def update_game(id: GameId, data: GameUpdate, db: DatabaseManager = Depends(get_db)):
    """
    Partially update a game.

    Fields that are absent or empty strings keep their stored value.
    """
    try:
        result = await db.games.update_game(id, data)
        if result is None:
            raise NotFoundError(f"No game with id: {id} found!")
        previous, game = result
        logger.info(f"Updated game {id}: {previous.title}/{previous.genre} -> {game.title}/{game.genre}")
        return SuccessResponse(
            message=f"Successfully updated {previous.title} ({previous.genre}) to {game.title} ({game.genre})",
            data=game
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error updating game {id}: {e}")
        raise InternalError(e)

@router.delete("/games/{id}", response_model=SuccessResponse[Game])
async def delete_game(id: GameId, db: DatabaseManager = Depends(get_db)):
    try:
        game = await db.games.delete_game(id)
        if game is None:
            raise NotFoundError(f"No game with id: {id} found!")
        logger.info(f"Deleted game {id} ({game.title})")
        return SuccessResponse(message=f"Successfully deleted {game.title}", data=game)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error deleting game {id}: {e}")
        raise InternalError(e)
