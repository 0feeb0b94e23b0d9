SECRET_KEY = "test-secret"

SUPABASE_URL = "http://supabase.test"
SUPABASE_KEY = "test-anon-key"

AUTH_PROVIDERS = ["github"]
AUTH_THEME = "dark"

CACHE_TTL_SECONDS = 0

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

DEBUG = False
TESTING = True
