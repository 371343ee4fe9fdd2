import os
from dotenv import load_dotenv

load_dotenv()

# Supabase - loaded from .env
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# Print defaults
DEFAULT_PRINT_SIZE = os.getenv("DEFAULT_PRINT_SIZE", "4R")

# Cache lifetimes in seconds
TEMPLATE_CACHE_TTL = int(os.getenv("TEMPLATE_CACHE_TTL", "300"))
PACKAGE_CACHE_TTL = int(os.getenv("PACKAGE_CACHE_TTL", "300"))

# Supabase tables
TABLE_TEMPLATES = "manual_templates"
TABLE_PACKAGES = "manual_packages"
TABLE_SESSIONS = "sessions"
TABLE_SESSION_TEMPLATES = "session_templates"

# sessions column holding the serialized slot sequence
SESSION_SLOTS_COLUMN = "template_slots"
