from typing import List, Optional, Tuple
from ..models.game import Game, GameInput, GameUpdate, GenrePlays

class GameManager:
    def __init__(self, db_connection):
        self.db = db_connection

    async def list_games(self) -> List[Game]:
        """Fetch every game ordered by id"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT id, title, genre
                FROM games
                ORDER BY id
            ''')
            return [Game(**dict(row)) for row in rows]

    async def get_game(self, game_id: int) -> Optional[Game]:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                SELECT id, title, genre
                FROM games
                WHERE id = $1
            ''', game_id)
            return Game(**dict(row)) if row else None

    async def create_game(self, data: GameInput) -> Game:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                INSERT INTO games (title, genre)
                VALUES ($1, $2)
                RETURNING id, title, genre
            ''', data.title, data.genre)
            return Game(**dict(row))

    async def update_game(self, game_id: int, data: GameUpdate) -> Optional[Tuple[Game, Game]]:
        """
        Apply a partial update in one statement.

        Absent or empty fields keep their stored value. Returns (previous, updated),
        or None when no game has that id.
        """
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                WITH previous AS (
                    SELECT id, title, genre
                    FROM games
                    WHERE id = $1
                    FOR UPDATE
                )
                UPDATE games g
                SET title = COALESCE(NULLIF($2::text, ''), previous.title),
                    genre = COALESCE(NULLIF($3::text, ''), previous.genre)
                FROM previous
                WHERE g.id = previous.id
                RETURNING g.id, g.title, g.genre,
                          previous.title AS previous_title,
                          previous.genre AS previous_genre
            ''', game_id, data.title, data.genre)
            if not row:
                return None
            previous = Game(id=row['id'], title=row['previous_title'], genre=row['previous_genre'])
            updated = Game(id=row['id'], title=row['title'], genre=row['genre'])
            return previous, updated

    async def delete_game(self, game_id: int) -> Optional[Game]:
        async with self.db.pool.acquire() as conn:
            row = await conn.fetchrow('''
                DELETE FROM games
                WHERE id = $1
                RETURNING id, title, genre
            ''', game_id)
            return Game(**dict(row)) if row else None

    async def popular_genres(self, limit: int) -> List[GenrePlays]:
        """Genres ranked by number of recorded plays, ties by genre name descending"""
        async with self.db.pool.acquire() as conn:
            rows = await conn.fetch('''
                SELECT g.genre, COUNT(s.id) AS plays
                FROM games g
                JOIN scores s ON s.game_id = g.id
                GROUP BY g.genre
                ORDER BY plays DESC, g.genre DESC
                LIMIT $1
            ''', limit)
            return [GenrePlays(**dict(row)) for row in rows]
