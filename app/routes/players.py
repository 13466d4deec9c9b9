from typing import List
from fastapi import APIRouter, Depends
from ..config import settings
from ..core.errors import ApiError, InternalError, NotFoundError, ValidationFailedError
from ..database import DatabaseManager, get_db
from ..models.params import PlayerId, PlayerName
from ..models.player import (
    NAME_MAX,
    FavoriteGame,
    Player,
    PlayerGameScore,
    PlayerInput,
    PlayerRename,
    PlayerScores,
    PlayerTotal,
)
from ..models.response import SuccessResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter(tags=["players"])

NO_PLAYS = "No games have been played yet"

@router.get("/players", response_model=SuccessResponse[List[Player]])
async def get_players(db: DatabaseManager = Depends(get_db)):
    """Fetch all players ordered by id."""
    try:
        players = await db.players.list_players()
        message = "Successfully fetched all info on players!" if players else "No registered players!"
        return SuccessResponse(message=message, data=players)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching players: {e}")
        raise InternalError(e)

@router.post("/players", response_model=SuccessResponse[Player], status_code=201)
async def create_player(data: PlayerInput, db: DatabaseManager = Depends(get_db)):
    """
    Register a new player.

    - **name**: 2-15 characters
    """
    try:
        player = await db.players.create_player(data)
        logger.info(f"Created player {player.id} ({player.name})")
        return SuccessResponse(message=f"Successfully added {player.name} to players list", data=player)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating player: {e}")
        raise InternalError(e)

# Static routes go before /players/{id}

@router.get("/players/scores", response_model=SuccessResponse[List[PlayerGameScore]])
async def get_players_scores(db: DatabaseManager = Depends(get_db)):
    """Every recorded score with player name and game title."""
    try:
        scores = await db.players.list_scores()
        if not scores:
            raise NotFoundError(NO_PLAYS)
        return SuccessResponse(message="Successfully fetched all gamescore info on players!", data=scores)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching player scores: {e}")
        raise InternalError(e)

@router.get("/players/top", response_model=SuccessResponse[List[PlayerTotal]])
async def get_top_players(db: DatabaseManager = Depends(get_db)):
    """Players with the highest total score."""
    try:
        leaders = await db.players.top_players(settings.REPORT_LIMIT)
        if not leaders:
            raise NotFoundError(NO_PLAYS)
        return SuccessResponse(message=f"Successfully fetched top {settings.REPORT_LIMIT} scores!", data=leaders)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching top players: {e}")
        raise InternalError(e)

@router.get("/players/inactive", response_model=SuccessResponse[List[Player]])
async def get_inactive_players(db: DatabaseManager = Depends(get_db)):
    """Players that have not recorded a single score."""
    try:
        players = await db.players.inactive_players()
        message = "Successfully fetched inactive players!" if players else "There are no inactive players!"
        return SuccessResponse(message=message, data=players)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching inactive players: {e}")
        raise InternalError(e)

@router.get("/players/recent", response_model=SuccessResponse[List[Player]])
async def get_recent_players(db: DatabaseManager = Depends(get_db)):
    """Players that joined within the trailing window, oldest first."""
    days = settings.RECENT_DAYS
    try:
        players = await db.players.recent_players(days)
        if players:
            message = f"Successfully fetched players registered within the last {days} days."
        else:
            message = f"There are no new players within the last {days} days"
        return SuccessResponse(message=message, data=players)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching recent players: {e}")
        raise InternalError(e)

@router.get("/players/favorite-game", response_model=SuccessResponse[List[FavoriteGame]])
async def get_favorite_games(db: DatabaseManager = Depends(get_db)):
    """Each player's most played game."""
    try:
        favorites = await db.players.favorite_games()
        if not favorites:
            raise NotFoundError(NO_PLAYS)
        return SuccessResponse(message="Successfully fetched players favorite games.", data=favorites)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching favorite games: {e}")
        raise InternalError(e)

@router.get("/players/{name}/scores", response_model=SuccessResponse[PlayerScores])
async def get_player_scores(name: PlayerName, db: DatabaseManager = Depends(get_db)):
    """
    Scores for one player, looked up by name.

    - **name**: matched case-insensitively, at most 15 characters
    """
    normalized = name.strip().lower()
    if not normalized:
        raise ValidationFailedError("name", "Name must not be blank", "string_too_short")
    if len(normalized) > NAME_MAX:
        raise ValidationFailedError("name", f"Name must contain at most {NAME_MAX} characters", "string_too_long")
    try:
        result = await db.players.get_player_scores(normalized)
        if result is None:
            raise NotFoundError(f"No player with name: {normalized} found!")
        if not result.scores:
            message = f"Player {result.name} has not registered any scores yet."
        else:
            message = f"Successfully fetched {result.name} scores!"
        return SuccessResponse(message=message, data=result)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching scores for {normalized}: {e}")
        raise InternalError(e)

@router.get("/players/{id}", response_model=SuccessResponse[Player])
async def get_player(id: PlayerId, db: DatabaseManager = Depends(get_db)):
    try:
        player = await db.players.get_player(id)
        if player is None:
            raise NotFoundError(f"No player with id: {id} found!")
        return SuccessResponse(message="Successfully fetched player!", data=player)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching player {id}: {e}")
        raise InternalError(e)

@router.patch("/players/{id}", response_model=SuccessResponse[PlayerRename])
async def rename_player(id: PlayerId, data: PlayerInput, db: DatabaseManager = Depends(get_db)):
    try:
        player = await db.players.rename_player(id, data)
        if player is None:
            raise NotFoundError(f"No player with id: {id} found!")
        logger.info(f"Renamed player {id}: {player.previous_name} -> {player.name}")
        return SuccessResponse(message=f"Successfully renamed {player.previous_name} to {player.name}", data=player)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error renaming player {id}: {e}")
        raise InternalError(e)

@router.delete("/players/{id}", response_model=SuccessResponse[Player])
async def delete_player(id: PlayerId, db: DatabaseManager = Depends(get_db)):
    try:
        player = await db.players.delete_player(id)
        if player is None:
            raise NotFoundError(f"No player with id: {id} found!")
        logger.info(f"Deleted player {id} ({player.name})")
        return SuccessResponse(message=f"Successfully deleted {player.name}", data=player)
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error deleting player {id}: {e}")
        raise InternalError(e)
