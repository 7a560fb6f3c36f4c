"""Content cache model - one assembled JSON blob per language."""

CONTENT_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS content_cache (
    lang VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
