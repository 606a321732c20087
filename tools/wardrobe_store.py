"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

from models.item import Item
from models.outfit import Outfit, OutfitItem, OutfitTag
from models.taxonomy import AVAILABLE_STATUS, ITEM_TYPES
from tools.observability import instrument_call

_TYPE_ORDER = {item_type: index for index, item_type in enumerate(ITEM_TYPES)}


class WardrobeStore:
    """Data-access interface consumed by the suggestion and outfit services."""

    def list_available_items(self, user_id: str) -> List[Item]:
        raise NotImplementedError

    def list_unavailable_items(self, user_id: str) -> List[Item]:
        raise NotImplementedError

    def last_worn_dates_by_item(self, user_id: str) -> Dict[str, date]:
        raise NotImplementedError

    def list_eligible_outfits(self, user_id: str, min_rating: int = 1) -> List[Outfit]:
        raise NotImplementedError

    def load_outfits_by_ids(self, user_id: str, outfit_ids: Sequence[str]) -> List[Outfit]:
        raise NotImplementedError

    def list_outfits(self, user_id: str, page: int = 0, size: int = 10) -> List[Outfit]:
        raise NotImplementedError

    def list_worn_outfits(self, user_id: str) -> List[Outfit]:
        raise NotImplementedError

    def list_all_outfits(self, user_id: str) -> List[Outfit]:
        raise NotImplementedError

    def list_tags(self, user_id: str) -> List[Dict[str, str]]:
        raise NotImplementedError

    def add_item(self, item: Item) -> Item:
        raise NotImplementedError

    def add_outfit(self, outfit: Outfit) -> Outfit:
        raise NotImplementedError

    def add_tag(self, user_id: str, tag_id: str, name: str) -> Dict[str, str]:
        raise NotImplementedError

    def delete_outfit(self, user_id: str, outfit_id: str) -> bool:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for items, outfits and tags."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """One transaction on a fresh connection, closed on exit."""

        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS items (
                    user_id TEXT NOT NULL,
                    id TEXT NOT NULL,
                    type TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'available',
                    name TEXT,
                    brand TEXT,
                    PRIMARY KEY (user_id, id)
                );
                CREATE TABLE IF NOT EXISTS outfits (
                    user_id TEXT NOT NULL,
                    id TEXT NOT NULL,
                    rating INTEGER NOT NULL,
                    wear_date TEXT,
                    PRIMARY KEY (user_id, id)
                );
                CREATE TABLE IF NOT EXISTS outfit_items (
                    user_id TEXT NOT NULL,
                    outfit_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    item_type TEXT NOT NULL,
                    PRIMARY KEY (user_id, outfit_id, item_id)
                );
                CREATE TABLE IF NOT EXISTS tags (
                    user_id TEXT NOT NULL,
                    id TEXT NOT NULL,
                    name TEXT NOT NULL,
                    PRIMARY KEY (user_id, id)
                );
                CREATE TABLE IF NOT EXISTS outfit_tags (
                    user_id TEXT NOT NULL,
                    outfit_id TEXT NOT NULL,
                    tag_id TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'manually_assigned',
                    PRIMARY KEY (user_id, outfit_id, tag_id)
                );
                """
            )

    @staticmethod
    def _placeholders(values: Sequence[object]) -> str:
        return ", ".join("?" for _ in values)

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> Item:
        return Item(
            id=row["id"],
            user_id=row["user_id"],
            type=row["type"],
            status=row["status"],
            name=row["name"],
            brand=row["brand"],
        )

    def _hydrate_outfits(self, conn: sqlite3.Connection, user_id: str, rows: Iterable[sqlite3.Row]) -> List[Outfit]:
        rows = list(rows)
        if not rows:
            return []
        outfit_ids = [row["id"] for row in rows]
        marks = self._placeholders(outfit_ids)

        items_by_outfit: Dict[str, List[OutfitItem]] = {outfit_id: [] for outfit_id in outfit_ids}
        for row in conn.execute(
            f"SELECT outfit_id, item_id, item_type FROM outfit_items WHERE user_id = ? AND outfit_id IN ({marks})",
            (user_id, *outfit_ids),
        ):
            items_by_outfit[row["outfit_id"]].append(OutfitItem(item_id=row["item_id"], item_type=row["item_type"]))

        tags_by_outfit: Dict[str, List[OutfitTag]] = {outfit_id: [] for outfit_id in outfit_ids}
        for row in conn.execute(
            f"SELECT outfit_id, tag_id, status FROM outfit_tags WHERE user_id = ? AND outfit_id IN ({marks}) ORDER BY rowid",
            (user_id, *outfit_ids),
        ):
            tags_by_outfit[row["outfit_id"]].append(OutfitTag(tag_id=row["tag_id"], status=row["status"]))

        outfits = []
        for row in rows:
            items = sorted(
                items_by_outfit[row["id"]],
                key=lambda entry: (_TYPE_ORDER.get(entry.item_type, len(_TYPE_ORDER)), entry.item_id),
            )
            outfits.append(
                Outfit(
                    id=row["id"],
                    user_id=row["user_id"],
                    rating=row["rating"],
                    wear_date=row["wear_date"],
                    items=items,
                    tags=tags_by_outfit[row["id"]],
                )
            )
        return outfits

    @instrument_call("list_available_items")
    def list_available_items(self, user_id: str) -> List[Item]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM items WHERE user_id = ? AND status = ? ORDER BY id",
                (user_id, AVAILABLE_STATUS),
            )
            return [self._row_to_item(row) for row in cursor.fetchall()]

    @instrument_call("list_unavailable_items")
    def list_unavailable_items(self, user_id: str) -> List[Item]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM items WHERE user_id = ? AND status != ? ORDER BY id",
                (user_id, AVAILABLE_STATUS),
            )
            return [self._row_to_item(row) for row in cursor.fetchall()]

    @instrument_call("last_worn_dates_by_item")
    def last_worn_dates_by_item(self, user_id: str) -> Dict[str, date]:
        with self._connect() as conn:
            cursor = conn.execute(
                """
                SELECT oi.item_id AS item_id, MAX(o.wear_date) AS last_worn_date
                FROM outfit_items oi
                JOIN outfits o ON o.id = oi.outfit_id AND o.user_id = oi.user_id
                WHERE oi.user_id = ? AND o.wear_date IS NOT NULL
                GROUP BY oi.item_id
                """,
                (user_id,),
            )
            return {row["item_id"]: date.fromisoformat(row["last_worn_date"]) for row in cursor.fetchall()}

    @instrument_call("list_eligible_outfits")
    def list_eligible_outfits(self, user_id: str, min_rating: int = 1) -> List[Outfit]:
        with self._connect() as conn:
            cursor = conn.execute(
                """
                SELECT * FROM outfits
                WHERE user_id = ? AND rating >= ?
                ORDER BY wear_date IS NULL, wear_date DESC, rowid
                """,
                (user_id, min_rating),
            )
            return self._hydrate_outfits(conn, user_id, cursor.fetchall())

    @instrument_call("load_outfits_by_ids")
    def load_outfits_by_ids(self, user_id: str, outfit_ids: Sequence[str]) -> List[Outfit]:
        outfit_ids = list(outfit_ids)
        if not outfit_ids:
            return []
        with self._connect() as conn:
            cursor = conn.execute(
                f"SELECT * FROM outfits WHERE user_id = ? AND id IN ({self._placeholders(outfit_ids)})",
                (user_id, *outfit_ids),
            )
            return self._hydrate_outfits(conn, user_id, cursor.fetchall())

    @instrument_call("list_outfits")
    def list_outfits(self, user_id: str, page: int = 0, size: int = 10) -> List[Outfit]:
        """Return one page of worn outfits, over-fetching a single extra row."""

        with self._connect() as conn:
            cursor = conn.execute(
                """
                SELECT * FROM outfits
                WHERE user_id = ? AND wear_date IS NOT NULL
                ORDER BY wear_date DESC, rowid
                LIMIT ? OFFSET ?
                """,
                (user_id, size + 1, page * size),
            )
            return self._hydrate_outfits(conn, user_id, cursor.fetchall())

    @instrument_call("list_worn_outfits")
    def list_worn_outfits(self, user_id: str) -> List[Outfit]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM outfits WHERE user_id = ? AND wear_date IS NOT NULL ORDER BY wear_date DESC, rowid",
                (user_id,),
            )
            return self._hydrate_outfits(conn, user_id, cursor.fetchall())

    @instrument_call("list_all_outfits")
    def list_all_outfits(self, user_id: str) -> List[Outfit]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM outfits WHERE user_id = ? ORDER BY wear_date IS NULL, wear_date DESC, rowid",
                (user_id,),
            )
            return self._hydrate_outfits(conn, user_id, cursor.fetchall())

    def list_tags(self, user_id: str) -> List[Dict[str, str]]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT id, name FROM tags WHERE user_id = ? ORDER BY name", (user_id,))
            return [{"id": row["id"], "name": row["name"]} for row in cursor.fetchall()]

    def add_item(self, item: Item) -> Item:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO items (user_id, id, type, status, name, brand)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (item.user_id, item.id, item.type, item.status, item.name, item.brand),
            )
        return item

    def add_outfit(self, outfit: Outfit) -> Outfit:
        wear_date = outfit.wear_date.isoformat() if outfit.wear_date else None
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO outfits (user_id, id, rating, wear_date) VALUES (?, ?, ?, ?)",
                (outfit.user_id, outfit.id, outfit.rating, wear_date),
            )
            conn.execute(
                "DELETE FROM outfit_items WHERE user_id = ? AND outfit_id = ?", (outfit.user_id, outfit.id)
            )
            conn.execute("DELETE FROM outfit_tags WHERE user_id = ? AND outfit_id = ?", (outfit.user_id, outfit.id))
            conn.executemany(
                "INSERT INTO outfit_items (user_id, outfit_id, item_id, item_type) VALUES (?, ?, ?, ?)",
                [(outfit.user_id, outfit.id, entry.item_id, entry.item_type) for entry in outfit.items],
            )
            conn.executemany(
                "INSERT INTO outfit_tags (user_id, outfit_id, tag_id, status) VALUES (?, ?, ?, ?)",
                [(outfit.user_id, outfit.id, tag.tag_id, tag.status) for tag in outfit.tags],
            )
        return outfit

    def add_tag(self, user_id: str, tag_id: str, name: str) -> Dict[str, str]:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO tags (user_id, id, name) VALUES (?, ?, ?)",
                (user_id, tag_id, name),
            )
        return {"id": tag_id, "name": name}

    def delete_outfit(self, user_id: str, outfit_id: str) -> bool:
        with self._connect() as conn:
            conn.execute("DELETE FROM outfit_items WHERE user_id = ? AND outfit_id = ?", (user_id, outfit_id))
            conn.execute("DELETE FROM outfit_tags WHERE user_id = ? AND outfit_id = ?", (user_id, outfit_id))
            cursor = conn.execute("DELETE FROM outfits WHERE user_id = ? AND id = ?", (user_id, outfit_id))
            return cursor.rowcount > 0


__all__ = ["WardrobeStore", "SQLiteWardrobeStore"]
