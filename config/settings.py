import os
from pathlib import Path
from dotenv import load_dotenv

# Load biến môi trường trong .env
BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    GOOGLE_AI_API_KEY: str | None = os.getenv("GOOGLE_AI_API_KEY")

    # gemini-2.0-flash: free tier, nhanh, đủ tốt để sinh code
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")

    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "120"))  # giây

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
