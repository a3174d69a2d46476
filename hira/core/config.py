"""
Configuration constants for the application.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# The single local user every request acts as.
# There is no login; all records belong to this id.
LOCAL_USER_ID = os.getenv("LOCAL_USER_ID", "user_1")

# Points earned per habit completion
HIRA_PER_COMPLETION = int(os.getenv("HIRA_PER_COMPLETION", "1"))

# Simulated cash conversion: 1 Hira = 1.5 rupees
HIRA_TO_RUPEE = float(os.getenv("HIRA_TO_RUPEE", "1.5"))

# Trailing window of the activity calendar on the profile page
CALENDAR_WINDOW_DAYS = int(os.getenv("CALENDAR_WINDOW_DAYS", "30"))

# Length of a newly created (non-predefined) challenge
CHALLENGE_LENGTH_DAYS = 30

ENABLE_DEBUG_ROUTES = os.getenv("ENABLE_DEBUG_ROUTES", "0") == "1"
