"""Infrastructure — database sessions, the user store, and logging setup."""
