import os

from . import parse_providers

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_URL = os.getenv("SUPABASE_URL", "http://localhost:54321")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")

AUTH_PROVIDERS = parse_providers(os.getenv("AUTH_PROVIDERS", "github"))
AUTH_THEME = os.getenv("AUTH_THEME", "dark")

# The cache is per process; 0 re-reads on every request so every worker sees each write.
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

DEBUG = True
