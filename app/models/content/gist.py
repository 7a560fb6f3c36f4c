"""Knowledge gist model - cached AI summary per language."""

KB_GIST_DDL = """
CREATE TABLE IF NOT EXISTS kb_gist (
    lang VARCHAR PRIMARY KEY,
    gist VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
