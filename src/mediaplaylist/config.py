import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# --- CONFIG --- playlist files
PLAYLIST_SUFFIXES = tuple(
    s.strip().lower()
    for s in os.getenv("PLAYLIST_SUFFIXES", ".m3u,.m3u8").split(",")
    if s.strip()
)
