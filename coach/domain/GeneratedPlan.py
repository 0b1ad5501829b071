"""GeneratedPlan domain entity: raw model text plus its training, nutrition and recovery sections."""
from dataclasses import dataclass
from typing import Dict

from coach.logic.sections.extractor import split_sections
from coach.utilities.constants import TRAINING_LABEL, NUTRITION_LABEL, RECOVERY_LABEL


@dataclass(frozen=True)
class GeneratedPlan:
    full_plan: str
    training: str
    nutrition: str
    recovery: str

    @staticmethod
    def from_response(text: str) -> "GeneratedPlan":
        sections = split_sections(text)
        return GeneratedPlan(
            full_plan=text,
            training=sections[TRAINING_LABEL],
            nutrition=sections[NUTRITION_LABEL],
            recovery=sections[RECOVERY_LABEL],
        )

    def to_record_sections(self) -> Dict[str, str]:
        return {
            "training_plan": self.training,
            "nutrition_plan": self.nutrition,
            "recovery_plan": self.recovery,
        }

    def to_dict(self) -> Dict[str, str]:
        return {
            "full_plan": self.full_plan,
            "training": self.training,
            "nutrition": self.nutrition,
            "recovery": self.recovery,
        }
