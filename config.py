import dotenv
import os

dotenv.load_dotenv()

PORT = int(os.getenv("APP_PORT", "5173"))

if not PORT:
    raise ValueError("APP_PORT is not set")

DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY")
DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-coder")
DEEPSEEK_MAX_TOKENS = int(os.getenv("DEEPSEEK_MAX_TOKENS", "8000"))
CHAT_MAX_TOKENS = int(os.getenv("CHAT_MAX_TOKENS", "2000"))

if not DEEPSEEK_API_KEY:
    print("Warning: DEEPSEEK_API_KEY is not set. Generation endpoints will fail.")

# Where the editor client reaches the relay
RELAY_URL = os.getenv("RELAY_URL", f"http://localhost:{PORT}")

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

UNSPLASH_API_KEY = os.getenv("UNSPLASH_API_KEY", "")
PIXABAY_API_KEY = os.getenv("PIXABAY_API_KEY", "")
PEXELS_API_KEY = os.getenv("PEXELS_API_KEY", "")
