import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./projects.db")
STORAGE_ROOT = os.getenv("STORAGE_ROOT", "./storage")

PRETAGGER_API_HOST = os.getenv("PRETAGGER_API_HOST", "localhost")
PRETAGGER_API_SCHEME = os.getenv("PRETAGGER_API_SCHEME", "https")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
