"""Shared fixtures: an in-memory stand-in for DatabaseManager and a TestClient wired to it."""

from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.database import get_db
from app.main import app
from app.models.game import Game, GameInput, GameUpdate, GenrePlays
from app.models.player import (
    FavoriteGame,
    Player,
    PlayerGameScore,
    PlayerInput,
    PlayerRename,
    PlayerScores,
    PlayerTotal,
    ScoreEntry,
)


class FakeStore:
    def __init__(self):
        self.games: Dict[int, Game] = {}
        self.players: Dict[int, Player] = {}
        self.scores: List[dict] = []
        self._next_game_id = 1
        self._next_player_id = 1

    def add_game(self, title: str, genre: str) -> Game:
        game = Game(id=self._next_game_id, title=title, genre=genre)
        self.games[game.id] = game
        self._next_game_id += 1
        return game

    def add_player(self, name: str, join_date: Optional[datetime] = None) -> Player:
        player = Player(
            id=self._next_player_id,
            name=name,
            join_date=join_date or datetime.now(timezone.utc),
        )
        self.players[player.id] = player
        self._next_player_id += 1
        return player

    def add_score(self, player_id: int, game_id: int, score: int) -> None:
        self.scores.append({
            "id": len(self.scores) + 1,
            "player_id": player_id,
            "game_id": game_id,
            "score": score,
        })


class FakeGames:
    def __init__(self, store: FakeStore):
        self.store = store

    async def list_games(self):
        return [self.store.games[k] for k in sorted(self.store.games)]

    async def get_game(self, game_id: int):
        return self.store.games.get(game_id)

    async def create_game(self, data: GameInput):
        return self.store.add_game(data.title, data.genre)

    async def update_game(self, game_id: int, data: GameUpdate):
        previous = self.store.games.get(game_id)
        if previous is None:
            return None
        updated = Game(
            id=game_id,
            title=data.title or previous.title,
            genre=data.genre or previous.genre,
        )
        self.store.games[game_id] = updated
        return previous, updated

    async def delete_game(self, game_id: int):
        game = self.store.games.pop(game_id, None)
        if game is not None:
            self.store.scores = [s for s in self.store.scores if s["game_id"] != game_id]
        return game

    async def popular_genres(self, limit: int):
        plays = Counter(self.store.games[s["game_id"]].genre for s in self.store.scores)
        ranked = sorted(plays.items(), key=lambda kv: kv[0], reverse=True)
        ranked.sort(key=lambda kv: kv[1], reverse=True)
        return [GenrePlays(genre=g, plays=n) for g, n in ranked[:limit]]


class FakePlayers:
    def __init__(self, store: FakeStore):
        self.store = store

    async def list_players(self):
        return [self.store.players[k] for k in sorted(self.store.players)]

    async def get_player(self, player_id: int):
        return self.store.players.get(player_id)

    async def create_player(self, data: PlayerInput):
        return self.store.add_player(data.name)

    async def rename_player(self, player_id: int, data: PlayerInput):
        previous = self.store.players.get(player_id)
        if previous is None:
            return None
        self.store.players[player_id] = previous.model_copy(update={"name": data.name})
        return PlayerRename(
            id=player_id,
            name=data.name,
            join_date=previous.join_date,
            previous_name=previous.name,
        )

    async def delete_player(self, player_id: int):
        player = self.store.players.pop(player_id, None)
        if player is not None:
            self.store.scores = [s for s in self.store.scores if s["player_id"] != player_id]
        return player

    async def list_scores(self):
        rows = [
            PlayerGameScore(
                name=self.store.players[s["player_id"]].name,
                title=self.store.games[s["game_id"]].title,
                score=s["score"],
            )
            for s in self.store.scores
        ]
        return sorted(rows, key=lambda r: r.name)

    async def get_player_scores(self, name: str):
        for player in self.store.players.values():
            if player.name.lower() == name.lower():
                scores = [
                    ScoreEntry(title=self.store.games[s["game_id"]].title, score=s["score"])
                    for s in self.store.scores
                    if s["player_id"] == player.id
                ]
                return PlayerScores(name=player.name, scores=scores)
        return None

    async def top_players(self, limit: int):
        totals = Counter()
        for s in self.store.scores:
            totals[s["player_id"]] += s["score"]
        ranked = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
        return [
            PlayerTotal(name=self.store.players[pid].name, total_score=total)
            for pid, total in ranked[:limit]
        ]

    async def inactive_players(self):
        active = {s["player_id"] for s in self.store.scores}
        return [p for p in await self.list_players() if p.id not in active]

    async def recent_players(self, days: int):
        cutoff = datetime.now(timezone.utc) - timedelta(days=days)
        recent = [p for p in self.store.players.values() if p.join_date >= cutoff]
        return sorted(recent, key=lambda p: (p.join_date, p.id))

    async def favorite_games(self):
        favorites = []
        for pid in sorted(self.store.players):
            plays = Counter(s["game_id"] for s in self.store.scores if s["player_id"] == pid)
            if not plays:
                continue
            game_id, count = sorted(plays.items(), key=lambda kv: (-kv[1], kv[0]))[0]
            favorites.append(FavoriteGame(
                id=pid,
                name=self.store.players[pid].name,
                title=self.store.games[game_id].title,
                plays=count,
            ))
        return favorites


class FakeDatabase:
    def __init__(self):
        self.store = FakeStore()
        self.games = FakeGames(self.store)
        self.players = FakePlayers(self.store)


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()
