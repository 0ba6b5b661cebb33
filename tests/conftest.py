import os

# Backend fail ngay khi import nếu thiếu key, test không bao giờ gọi API thật.
os.environ.setdefault("GOOGLE_AI_API_KEY", "test-key")
os.environ.setdefault("BACKEND_URL", "http://backend.test")
