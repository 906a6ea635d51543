# =============================================================================
# core/models/lead.py - Contact Lead Schemas
# =============================================================================
# Leads come from the public contact form. Anyone may submit one; only
# admins can read or delete them.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict

from lib.utils import clean_optional_text, is_valid_email


class LeadInput(BaseModel):
    """
    Contact form submission.

    Example:
        {"name": "Jo", "email": "Jo@X.com ", "budget": "10-25k", "message": "Hi"}
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    budget: str | None = None
    timeline: str | None = None
    message: str | None = None

    def to_record(self) -> dict[str, Any]:
        """
        Validate and normalize into a `leads` row.

        Raises:
            ValueError: With the first problem found, in field order
        """
        name = (self.name or "").strip()
        email = (self.email or "").strip()
        message = (self.message or "").strip()

        if not name:
            raise ValueError("Name is required")
        if not email:
            raise ValueError("Email is required")
        if not message:
            raise ValueError("Message is required")
        if not is_valid_email(email):
            raise ValueError("Invalid email format")

        return {
            "name": name,
            "email": email.lower(),
            "budget": clean_optional_text(self.budget),
            "timeline": clean_optional_text(self.timeline),
            "message": message,
        }
