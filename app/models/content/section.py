"""Site content section model - source of truth per (section, lang)."""

# data holds the JSON text exactly as written by the admin path
SITE_CONTENT_DDL = """
CREATE TABLE IF NOT EXISTS site_content (
    section VARCHAR NOT NULL,
    lang VARCHAR NOT NULL,
    data VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    PRIMARY KEY (section, lang)
)
"""
