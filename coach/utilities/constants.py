from typing import Final

FORM_FIELDS: Final[tuple[str, ...]] = ("sport", "age", "height", "weight", "injuries", "goal")
REQUIRED_FIELDS: Final[tuple[str, ...]] = ("sport", "age", "height", "weight", "goal")

TRAINING_LABEL: Final[str] = "TRAINING PLAN"
NUTRITION_LABEL: Final[str] = "NUTRITION PLAN"
RECOVERY_LABEL: Final[str] = "RECOVERY PLAN"

NO_INJURIES: Final[str] = "None"

MISSING_FIELDS_ALERT: Final[str] = "Please fill in all required fields"
GENERATION_FAILED_ALERT: Final[str] = "Failed to generate plan. Please try again."

PROMPT_TEMPLATE: Final[str] = (
    """You are an expert sports coach and nutritionist. Create a comprehensive 4-week personalized training program for an athlete with the following profile:

Sport: {sport}
Age: {age} years old
Height: {height} cm
Weight: {weight} kg
Injuries/Limitations: {injuries}
Goal: {goal}

Create a detailed plan with three sections:

1. **TRAINING PLAN** (4 weeks)
   - Weekly structure with specific daily workouts
   - Warm-up routines (5-10 minutes)
   - Main exercises with sets, reps, and intensity
   - Cool-down routines (5-10 minutes)
   - Progressive overload week by week
   - Sport-specific drills and techniques

2. **NUTRITION PLAN**
   - Daily calorie targets based on their metrics and goal
   - Macro breakdown (protein, carbs, fats in grams)
   - Meal timing strategy (pre/post workout)
   - 3 example meal plans with specific foods
   - Hydration guidelines
   - Supplement recommendations if applicable

3. **RECOVERY PLAN**
   - Sleep recommendations (hours and timing)
   - Daily mobility/stretching routine (10-15 minutes)
   - Active recovery activities
   - Injury prevention exercises
   - Rest day activities
   - When to take complete rest

Consider their age, current fitness level, sport demands, and any injuries mentioned. Make it practical, safe, and effective. Be specific with exercises, portions, and timings. Format using markdown with clear headers and bullet points."""
)
