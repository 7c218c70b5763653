"""
Database check: verifies every table exists and prints the DDL for the
contact_messages table when it is missing. Run once after provisioning:

    python setup_database.py
"""
import logging
import sys

from sqlalchemy import inspect

from core.db import engine
from core.logger import setup_logging

logger = logging.getLogger("setup_database")

REQUIRED_TABLES = [
    "gallery",
    "menu_items",
    "reservations",
    "about_content",
    "settings",
    "contact_messages",
    "admins",
]

CONTACT_MESSAGES_DDL = """
CREATE TABLE contact_messages (
  id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
  name TEXT NOT NULL,
  email TEXT NOT NULL,
  phone TEXT,
  message TEXT NOT NULL,
  status TEXT DEFAULT 'unread',
  reply_message TEXT,
  reply_sent_at TIMESTAMP WITH TIME ZONE,
  created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
);

ALTER TABLE contact_messages ENABLE ROW LEVEL SECURITY;
CREATE POLICY "Allow public insert" ON contact_messages FOR INSERT WITH CHECK (true);
CREATE POLICY "Allow authenticated full access" ON contact_messages FOR ALL USING (auth.role() = 'authenticated');
"""


def check_tables(bind=engine):
    """Returns {table: exists}."""
    existing = set(inspect(bind).get_table_names())
    return {table: table in existing for table in REQUIRED_TABLES}


def setup_database(bind=engine, out=sys.stdout) -> bool:
    logger.info("Checking database tables...")
    status = check_tables(bind)

    if not status["contact_messages"]:
        print("contact_messages table does not exist", file=out)
        print("\nPlease run this SQL in your database SQL editor:\n", file=out)
        print("----------------------------------------", file=out)
        print(CONTACT_MESSAGES_DDL, file=out)
        print("----------------------------------------\n", file=out)

    for table, ok in status.items():
        print(f"{'OK     ' if ok else 'MISSING'} {table}", file=out)

    all_ok = all(status.values())
    logger.info("Database check complete (%s)", "ok" if all_ok else "tables missing")
    return all_ok


if __name__ == "__main__":
    setup_logging()
    sys.exit(0 if setup_database() else 1)
