"""Query helpers over the ORM models (credential and refresh token stores)."""
