"""Section extraction for generated plan text.

The model is asked to emit ``**TRAINING PLAN**``, ``**NUTRITION PLAN**`` and
``**RECOVERY PLAN**`` markers. A section runs from its marker up to the next
emphasized all-caps phrase or the end of the text. Output that does not follow
the format falls back to the whole text instead of failing.
"""
import re
from typing import Dict

from coach.utilities.constants import TRAINING_LABEL, NUTRITION_LABEL, RECOVERY_LABEL

SECTION_LABELS = (TRAINING_LABEL, NUTRITION_LABEL, RECOVERY_LABEL)

# label match is case-insensitive, the terminating marker is not
_NEXT_LABEL = r"(?=\*\*[A-Z\s]+\*\*|\Z)"


def _section_pattern(label: str) -> "re.Pattern[str]":
    return re.compile(r"\*\*(?i:" + re.escape(label) + r")\*\*([\s\S]*?)" + _NEXT_LABEL)


def extract_section(text: str, label: str) -> str:
    """Return the trimmed text following ``**label**``, or ``text`` unchanged if the label is absent."""
    match = _section_pattern(label).search(text)
    return match.group(1).strip() if match else text


def split_sections(text: str) -> Dict[str, str]:
    """Extract the training, nutrition and recovery sections keyed by label."""
    return {label: extract_section(text, label) for label in SECTION_LABELS}
