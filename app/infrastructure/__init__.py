"""Infrastructure adapters (database, mail)."""
