# =============================================================================
# core/services/lead_service.py - Contact Lead Logic
# =============================================================================
# Leads are submitted anonymously from the contact form. A submission must
# never bounce just because the `leads` table has not been migrated yet:
# the normalized lead is echoed back with a notice instead.
# =============================================================================

import logging
import time
from datetime import datetime, timezone
from typing import Any

from app.exceptions import DatabaseError, InvalidPayloadError
from core.models.lead import LeadInput
from core.services.resource_service import ResourceService
from lib.supabase_client import error_message, is_missing_table_error

logger = logging.getLogger(__name__)

UNSAVED_NOTICE = "Lead received (not saved to database - table missing)"


class LeadService(ResourceService):
    """Service for the `leads` table."""

    table = "leads"
    resource_name = "Lead"

    def submit(self, payload: LeadInput) -> dict[str, Any]:
        """
        Validate and store a contact form submission.

        Returns:
            The stored row, or an unsaved echo if the table is missing

        Raises:
            InvalidPayloadError: If name/email/message are missing or the
                email is malformed
            DatabaseError: On any other backend failure
        """
        try:
            record = payload.to_record()
        except ValueError as e:
            raise InvalidPayloadError(str(e))

        try:
            response = self.db.table(self.table).insert(record).execute()
        except Exception as e:
            if is_missing_table_error(e):
                logger.warning("Table leads does not exist, skipping database save")
                return {
                    "id": str(int(time.time() * 1000)),
                    **record,
                    "created_at": datetime.now(timezone.utc).isoformat(),
                    "notice": UNSAVED_NOTICE,
                }
            logger.error(f"Failed to save lead: {e}")
            raise DatabaseError(error_message(e))

        if not response.data:
            raise DatabaseError("Insert returned no data")

        lead = response.data[0]
        logger.info(f"New lead received: {lead.get('id')}")
        return lead

    def delete_many(self, lead_ids: list[str]) -> list[dict[str, Any]]:
        """
        Delete several leads at once.

        Returns:
            The rows that were actually deleted (unknown ids are ignored)
        """
        if not lead_ids:
            raise InvalidPayloadError("At least one lead id is required")

        try:
            response = (
                self.db.table(self.table)
                .delete()
                .in_("id", lead_ids)
                .execute()
            )
        except Exception as e:
            if is_missing_table_error(e):
                return []
            logger.error(f"Bulk delete of leads failed: {e}")
            raise DatabaseError(error_message(e))

        deleted = response.data or []
        logger.info(f"Deleted {len(deleted)} of {len(lead_ids)} requested leads")
        return deleted
