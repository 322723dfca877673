from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (optional file; defaults below apply without it)
load_dotenv(BASE_DIR / "secret.env")

API_URL         = os.getenv(
    "MOVIE_CATALOG_API_URL",
    "https://movie-catalogue-backend.vercel.app/api/movies",
).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("MOVIE_CATALOG_TIMEOUT", "10"))

if not API_URL:
    raise EnvironmentError("MOVIE_CATALOG_API_URL is set but empty")
if REQUEST_TIMEOUT <= 0:
    raise EnvironmentError("MOVIE_CATALOG_TIMEOUT must be a positive number of seconds")

# File / folder paths
LOG_PATH  = Path(os.getenv("MOVIE_CATALOG_LOG", BASE_DIR / "catalog_debug.log"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# UI constants
ACCENT_COLOR            = "#3b82f6"
WINDOW_TITLE            = "Movie Catalog"
REQUIRED_FIELDS_MESSAGE = "All fields except the image are required!"
NO_MATCHES_MESSAGE      = "No movies match your search."
