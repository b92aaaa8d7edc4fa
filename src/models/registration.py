"""Registration data model for the workshop."""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class Registration:
    """One attendee's workshop sign-up."""

    full_name: str
    corporate_email: str
    department: str
    automation_level: str
    needs_accessibility: bool
    participation_day: str  # YYYY-MM-DD
    accessibility_detail: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[str] = None  # ISO 8601, set by the store

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registration":
        """
        Build a registration from a stored dictionary.

        Args:
            data: Dictionary with registration fields

        Returns:
            Registration instance

        Raises:
            KeyError: If a required field is missing
            ValueError: If needs_accessibility is stored as a non-boolean
        """
        needs_accessibility = data.get("needs_accessibility", False)
        if not isinstance(needs_accessibility, bool):
            raise ValueError(f"needs_accessibility must be a boolean, got {needs_accessibility!r}")

        return cls(
            full_name=data["full_name"],
            corporate_email=data["corporate_email"],
            department=data["department"],
            automation_level=data["automation_level"],
            needs_accessibility=needs_accessibility,
            participation_day=data["participation_day"],
            accessibility_detail=data.get("accessibility_detail"),
            notes=data.get("notes"),
            id=data.get("id"),
            created_at=data.get("created_at"),
        )

    def form_values(self) -> Dict[str, Any]:
        """Return the editable fields, as accepted by the validator."""
        values = self.to_dict()
        values.pop("id")
        values.pop("created_at")
        return values
