import os
from dotenv import load_dotenv

load_dotenv()

TESTING = os.getenv("TESTING") == "1"
DATABASE_URL = "sqlite://" if TESTING else os.getenv("DATABASE_URL", "sqlite://")

# Seed data only makes sense for the in-memory demo database
SEED_DEFAULT_DATA = not TESTING and os.getenv("SEED_DEFAULT_DATA", "1") == "1"

DEFAULT_HALL_ID = os.getenv("DEFAULT_HALL_ID", "white")
DEFAULT_DURATION = 120

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")]
