import json
import sqlite3
from datetime import UTC, datetime
from typing import Any

from linksaver.ports.documents import DocumentNotFoundError, DocumentStoreError


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteDocumentStore:
    """Document store backed by a single ``documents`` table of JSON blobs."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise DocumentStoreError(f"Cannot open document store: {e}") from e
        conn.row_factory = dict_factory
        return conn

    def _now(self) -> str:
        return datetime.now(UTC).isoformat()

    def _fetch(self, conn: sqlite3.Connection, collection: str, doc_id: str) -> dict[str, Any] | None:
        row = conn.execute(
            "SELECT data_json FROM documents WHERE collection = ? AND doc_id = ?",
            (collection, doc_id),
        ).fetchone()
        if not row:
            return None
        data: dict[str, Any] = json.loads(row["data_json"])
        return data

    def _write(
        self, conn: sqlite3.Connection, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        # ON CONFLICT keeps the original seq, so an overwrite keeps its place
        conn.execute(
            """
            INSERT INTO documents (collection, doc_id, data_json, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(collection, doc_id) DO UPDATE SET
                data_json=excluded.data_json,
                updated_at=excluded.updated_at
        """,
            (collection, doc_id, json.dumps(data), self._now()),
        )

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            return self._fetch(conn, collection, doc_id)
        except sqlite3.Error as e:
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()

    def set(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        conn = self._get_conn()
        try:
            payload = dict(data)
            if merge:
                existing = self._fetch(conn, collection, doc_id) or {}
                payload = {**existing, **data}
            self._write(conn, collection, doc_id, payload)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()

    def update(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        conn = self._get_conn()
        try:
            existing = self._fetch(conn, collection, doc_id)
            if existing is None:
                raise DocumentNotFoundError(collection, doc_id)
            self._write(conn, collection, doc_id, {**existing, **data})
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()

    def delete(self, collection: str, doc_id: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "DELETE FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, doc_id),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()

    def list(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT doc_id, data_json FROM documents WHERE collection = ? ORDER BY seq ASC",
                (collection,),
            ).fetchall()
            return [(row["doc_id"], json.loads(row["data_json"])) for row in rows]
        except sqlite3.Error as e:
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()

    def count(self, collection: str) -> int:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT COUNT(*) AS n FROM documents WHERE collection = ?", (collection,)
            ).fetchone()
            return int(row["n"])
        except sqlite3.Error as e:
            raise DocumentStoreError(str(e)) from e
        finally:
            conn.close()
