from typing import List, Optional
from ..models.player import (
    FavoriteGame,
    Player,
    PlayerGameScore,
    PlayerInput,
    PlayerRename,
    PlayerScores,
    PlayerTotal,
    ScoreEntry,
)

class PlayerManager:
    def __init__(self, db_connection):
        self.db = db_connection

    async def list_players(self) -> List[Player]:
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT id, name, join_date
                FROM players
                ORDER BY id
            ''')
            return [Player(**dict(row)) for row in rows]

    async def get_player(self, player_id: int) -> Optional[Player]:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                SELECT id, name, join_date
                FROM players
                WHERE id = $1
            ''', player_id)
            return Player(**dict(row)) if row else None

    async def create_player(self, data: PlayerInput) -> Player:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                INSERT INTO players (name)
                VALUES ($1)
                RETURNING id, name, join_date
            ''', data.name)
            return Player(**dict(row))

    async def rename_player(self, player_id: int, data: PlayerInput) -> Optional[PlayerRename]:
        """Rename a player, reporting the old and new name from the same statement"""
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                WITH previous AS (
                    SELECT id, name
                    FROM players
                    WHERE id = $1
                    FOR UPDATE
                )
                UPDATE players p
                SET name = $2
                FROM previous
                WHERE p.id = previous.id
                RETURNING p.id, p.name, p.join_date, previous.name AS previous_name
            ''', player_id, data.name)
            return PlayerRename(**dict(row)) if row else None

    async def delete_player(self, player_id: int) -> Optional[Player]:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                DELETE FROM players
                WHERE id = $1
                RETURNING id, name, join_date
            ''', player_id)
            return Player(**dict(row)) if row else None

    async def list_scores(self) -> List[PlayerGameScore]:
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT p.name, g.title, s.score
                FROM players p
                JOIN scores s ON p.id = s.player_id
                JOIN games g ON g.id = s.game_id
                ORDER BY p.name, s.id
            ''')
            return [PlayerGameScore(**dict(row)) for row in rows]

    async def get_player_scores(self, name: str) -> Optional[PlayerScores]:
        """
        Scores of the player whose name matches case-insensitively.

        Returns None when no such player exists. A player without scores yields
        an empty score list.
        """
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT p.name, g.title, s.score
                FROM players p
                LEFT JOIN scores s ON p.id = s.player_id
                LEFT JOIN games g ON g.id = s.game_id
                WHERE LOWER(p.name) = LOWER($1)
                ORDER BY p.id, s.id
            ''', name)
            if not rows:
                return None
            scores = [
                ScoreEntry(title=row['title'], score=row['score'])
                for row in rows
                if row['score'] is not None
            ]
            return PlayerScores(name=rows[0]['name'], scores=scores)

    async def top_players(self, limit: int) -> List[PlayerTotal]:
        """Players ranked by summed score, ties by player id"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT p.name, SUM(s.score) AS total_score
                FROM players p
                JOIN scores s ON p.id = s.player_id
                GROUP BY p.id, p.name
                ORDER BY total_score DESC, p.id ASC
                LIMIT $1
            ''', limit)
            return [PlayerTotal(**dict(row)) for row in rows]

    async def inactive_players(self) -> List[Player]:
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT p.id, p.name, p.join_date
                FROM players p
                WHERE NOT EXISTS (
                    SELECT 1 FROM scores s WHERE s.player_id = p.id
                )
                ORDER BY p.id
            ''')
            return [Player(**dict(row)) for row in rows]

    async def recent_players(self, days: int) -> List[Player]:
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT id, name, join_date
                FROM players
                WHERE join_date >= CURRENT_DATE - $1::int
                ORDER BY join_date ASC, id ASC
            ''', days)
            return [Player(**dict(row)) for row in rows]

    async def favorite_games(self) -> List[FavoriteGame]:
        """Each player's most played game; ties go to the lowest game id"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                WITH plays_per_game AS (
                    SELECT player_id, game_id, COUNT(*) AS plays
                    FROM scores
                    GROUP BY player_id, game_id
                ),
                ranked AS (
                    SELECT *,
                           ROW_NUMBER() OVER (
                               PARTITION BY player_id
                               ORDER BY plays DESC, game_id ASC
                           ) AS rn
                    FROM plays_per_game
                )
                SELECT p.id, p.name, g.title, r.plays
                FROM ranked r
                JOIN players p ON p.id = r.player_id
                JOIN games g ON g.id = r.game_id
                WHERE r.rn = 1
                ORDER BY p.id
            ''')
            return [FavoriteGame(**dict(row)) for row in rows]
