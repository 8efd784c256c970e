# robust .env loading
import os
from pathlib import Path

from dotenv import load_dotenv

# 1) load from CWD (project root when you run commands there)
load_dotenv(override=False)
# 2) also try repo root even if code runs from src/
repo_root = Path(__file__).resolve().parents[2]
env_path = repo_root / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=True)

# --- Flask / server ---
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
FLASK_ENV = os.getenv("FLASK_ENV", "production")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- MongoDB ---
MONGODB_URI = os.getenv("MONGODB_URI")
MONGO_DB = os.getenv("MONGO_DB", "eventhub")

# --- Cloudinary (event cover images) ---
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "EventHub")

# --- Event catalogue ---
EVENT_MODES = ("online", "offline", "hybrid")
