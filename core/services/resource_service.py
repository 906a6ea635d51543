# =============================================================================
# core/services/resource_service.py - Shared CRUD Logic
# =============================================================================
# One table, five operations: list, get, create, update, delete.
# Every resource service inherits this and only declares its table, its
# display name, and how it normalizes input/output rows.
#
# Error policy:
# - missing table        -> empty list / not found
# - zero rows            -> ResourceNotFoundError (404)
# - malformed id (22P02) -> ResourceNotFoundError (404)
# - anything else        -> DatabaseError (500) with the raw backend message
# =============================================================================

import logging
from typing import Any

from app.exceptions import DatabaseError, InvalidPayloadError, ResourceNotFoundError
from lib.supabase_client import (
    SupabaseClient,
    error_message,
    is_invalid_id_error,
    is_missing_table_error,
    is_no_rows_error,
)

logger = logging.getLogger(__name__)


class ResourceService:
    """
    Base service for a single Supabase table.

    Subclasses set `table`, `resource_name` and optionally
    `default_order`, and may override `normalize_row`.
    """

    table: str = ""
    resource_name: str = "Resource"
    default_order: str = "created_at"

    def __init__(self, db: SupabaseClient):
        self.db = db

    def normalize_row(self, row: dict[str, Any]) -> dict[str, Any]:
        """Hook for read-side defaults. Identity by default."""
        return row

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def fetch_all(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        List rows, newest first by default.

        Args:
            filters: Column -> value equality filters (None values skipped)
            order_by: Column to sort on (defaults to `default_order`)
            descending: Sort direction
            limit: Maximum rows to return

        Returns:
            List of rows; empty if the table does not exist yet
        """
        query = self.db.table(self.table).select("*")

        for column, value in (filters or {}).items():
            if value is not None:
                query = query.eq(column, value)

        query = query.order(order_by or self.default_order, desc=descending)
        if limit:
            query = query.limit(limit)

        try:
            response = query.execute()
        except Exception as e:
            if is_missing_table_error(e):
                logger.warning(f"Table {self.table} does not exist, returning empty list")
                return []
            logger.error(f"Failed to list {self.table}: {e}")
            raise DatabaseError(error_message(e))

        return [self.normalize_row(row) for row in (response.data or [])]

    def fetch_one(self, record_id: str) -> dict[str, Any]:
        """
        Fetch one row by id.

        Raises:
            ResourceNotFoundError: If no row has this id (or no table exists)
            DatabaseError: On any other backend failure
        """
        try:
            response = (
                self.db.table(self.table)
                .select("*")
                .eq("id", record_id)
                .single()
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e) or is_invalid_id_error(e) or is_missing_table_error(e):
                raise ResourceNotFoundError(self.resource_name)
            logger.error(f"Failed to fetch {self.table} {record_id}: {e}")
            raise DatabaseError(error_message(e))

        if not response.data:
            raise ResourceNotFoundError(self.resource_name)
        return self.normalize_row(response.data)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one normalized row and return it as stored.

        Raises:
            DatabaseError: If the insert fails or returns nothing
        """
        try:
            response = self.db.table(self.table).insert(record).execute()
        except Exception as e:
            logger.error(f"Insert into {self.table} failed: {e}")
            raise DatabaseError(error_message(e))

        if not response.data:
            raise DatabaseError("Insert returned no data")

        row = response.data[0]
        logger.info(f"Created {self.resource_name.lower()}: {row.get('id')}")
        return self.normalize_row(row)

    def update(self, record_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """
        Write the given columns to one row.

        Raises:
            ResourceNotFoundError: If no row has this id
            DatabaseError: On any other backend failure
        """
        try:
            response = (
                self.db.table(self.table)
                .update(changes)
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e) or is_invalid_id_error(e) or is_missing_table_error(e):
                raise ResourceNotFoundError(self.resource_name)
            logger.error(f"Update of {self.table} {record_id} failed: {e}")
            raise DatabaseError(error_message(e))

        if not response.data:
            raise ResourceNotFoundError(self.resource_name)

        logger.info(f"Updated {self.resource_name.lower()}: {record_id}")
        return self.normalize_row(response.data[0])

    def delete(self, record_id: str) -> dict[str, Any]:
        """
        Delete one row and return what was removed.

        Raises:
            ResourceNotFoundError: If no row has this id
            DatabaseError: On any other backend failure
        """
        try:
            response = (
                self.db.table(self.table)
                .delete()
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e) or is_invalid_id_error(e) or is_missing_table_error(e):
                raise ResourceNotFoundError(self.resource_name)
            logger.error(f"Delete of {self.table} {record_id} failed: {e}")
            raise DatabaseError(error_message(e))

        if not response.data:
            raise ResourceNotFoundError(self.resource_name)

        logger.info(f"Deleted {self.resource_name.lower()}: {record_id}")
        return self.normalize_row(response.data[0])

    # -------------------------------------------------------------------------
    # Request Bodies
    # -------------------------------------------------------------------------

    def create_from(self, payload: Any) -> dict[str, Any]:
        """
        Validate a request model and insert it.

        `payload` is any input model exposing to_record().

        Raises:
            InvalidPayloadError: If required fields are missing or invalid
        """
        try:
            record = payload.to_record()
        except ValueError as e:
            raise InvalidPayloadError(str(e))
        return self.create(record)

    def update_from(self, record_id: str, payload: Any) -> dict[str, Any]:
        """
        Apply a partial update: only fields present in the body are written.

        Raises:
            InvalidPayloadError: If the body contains no known fields
        """
        try:
            changes = payload.to_record(partial=True)
        except ValueError as e:
            raise InvalidPayloadError(str(e))

        if not changes:
            raise InvalidPayloadError("No fields to update")
        return self.update(record_id, changes)
