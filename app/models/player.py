# --- Pydantic Models ---
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import datetime

NAME_MIN, NAME_MAX = 2, 15

class PlayerInput(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., min_length=NAME_MIN, max_length=NAME_MAX)

class Player(BaseModel):
    id: int
    name: str
    join_date: datetime

class PlayerRename(Player):
    previous_name: str

class PlayerGameScore(BaseModel):
    name: str
    title: str
    score: int

class ScoreEntry(BaseModel):
    title: str
    score: int

class PlayerScores(BaseModel):
    name: str
    scores: List[ScoreEntry]

class PlayerTotal(BaseModel):
    name: str
    total_score: int

class FavoriteGame(BaseModel):
    id: int
    name: str
    title: str
    plays: int
