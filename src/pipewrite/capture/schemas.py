"""
Schemas for the capture system.
"""

from pydantic import BaseModel, Field


class CaptureResult(BaseModel):
    """Outcome of a completed stdin-to-file write."""
    path: str
    byte_count: int = Field(ge=0)  # On-disk size after the write

    def summary(self) -> str:
        return f"✓ Created: {self.path} ({self.byte_count} bytes)"
