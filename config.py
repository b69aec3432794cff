import os
from dotenv import load_dotenv

load_dotenv()

# Face API - loaded from .env
FACE_API_URL = os.getenv("FACE_API_URL", "https://faceapi.example.com/analyze")
FACE_API_TIMEOUT = float(os.getenv("FACE_API_TIMEOUT", "30"))

# Queue the enqueue proxy writes to
QUEUE_URL = os.getenv("QUEUE_URL")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
