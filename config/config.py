# config/config.py
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


class Config:
    # --- App settings ---
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    # --- CORS Settings ---
    # Accept comma-separated values: e.g., "http://localhost:3000,http://127.0.0.1:3000"
    ALLOWED_ORIGINS = [
        o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    ]

    # --- Cloudinary (media host) ---
    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")

    # --- Uploads ---
    MAX_IMAGE_SIZE = 3 * 1024 * 1024  # 3MB per image
    # Whole request body: image plus room for the form fields
    MAX_CONTENT_LENGTH = MAX_IMAGE_SIZE + 1024 * 1024

    # --- Datastore ---
    DATA_FILE = os.getenv("DATA_FILE", os.path.join(BASE_DIR, "data.json"))
