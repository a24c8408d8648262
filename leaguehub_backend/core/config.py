import os

# =====================================
# Global configuration for LeagueHub
# =====================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database file (SQLite). Override with LEAGUEHUB_DB_PATH, e.g. in tests.
DB_PATH = os.getenv("LEAGUEHUB_DB_PATH", os.path.join(BASE_DIR, "leaguehub.db"))

# Echo SQL statements to the log (noisy, off unless debugging)
DB_ECHO = _env_flag("LEAGUEHUB_DB_ECHO", False)

# AUTO_SEED:
# When True, an empty store is populated with the demo league
# (three teams, two fixtures, default settings) on startup.
AUTO_SEED = _env_flag("LEAGUEHUB_AUTO_SEED", True)

# Primary administrator, seeded on startup if no admin exists
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
PRIMARY_ADMIN_ID = "u-admin"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
