from coach.domain.AthleteProfile import AthleteProfile
from coach.utilities.constants import PROMPT_TEMPLATE, NO_INJURIES


def build_prompt(profile: AthleteProfile) -> str:
    """Interpolate the profile into the coaching prompt (no validation)."""
    return PROMPT_TEMPLATE.format(
        sport=profile.sport,
        age=profile.age,
        height=profile.height,
        weight=profile.weight,
        injuries=profile.injuries or NO_INJURIES,
        goal=profile.goal,
    )
