"""
Input validation schemas using Pydantic for the JSON API.
"""
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class AthleteProfileInput(BaseModel):
    """Schema for an athlete profile submitted as JSON."""
    sport: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., gt=0, le=120)
    height: float = Field(..., gt=0, le=300, description="Height in cm")
    weight: float = Field(..., gt=0, le=500, description="Weight in kg")
    injuries: Optional[str] = Field(default="", max_length=2000)
    goal: str = Field(..., min_length=1, max_length=2000)

    @field_validator('sport', 'goal')
    @classmethod
    def validate_required_text(cls, v):
        """Reject values that are only whitespace."""
        if not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()

    @field_validator('injuries')
    @classmethod
    def strip_injuries(cls, v):
        """Treat a missing injuries value as empty text."""
        return (v or "").strip()

    def to_form(self) -> Dict[str, str]:
        return {
            "sport": self.sport,
            "age": str(self.age),
            "height": f"{self.height:g}",
            "weight": f"{self.weight:g}",
            "injuries": self.injuries or "",
            "goal": self.goal,
        }
