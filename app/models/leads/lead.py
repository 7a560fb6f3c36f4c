"""Lead model - one row per distinct email."""

LEAD_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS leads_id_seq START 1"

LEAD_DDL = """
CREATE TABLE IF NOT EXISTS leads (
    id BIGINT PRIMARY KEY DEFAULT nextval('leads_id_seq'),
    email VARCHAR NOT NULL,
    source VARCHAR,
    name VARCHAR,
    interest VARCHAR,
    chat_summary VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""

# Added after the first release; older deployments lack them.
LEAD_ADDITIVE_COLUMNS = {
    "interest": "VARCHAR",
    "chat_summary": "VARCHAR",
}

LEAD_INDEXES = [
    "CREATE UNIQUE INDEX IF NOT EXISTS idx_leads_email ON leads(email)",
]
