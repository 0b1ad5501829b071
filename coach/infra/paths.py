from coach.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PLANS_FILE = DATA_DIR / 'training_plans.json'

__all__ = ['DATA_DIR', 'PLANS_FILE']
