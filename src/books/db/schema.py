# ABOUTME: SQL DDL statements for the books database schema.
# ABOUTME: Creates the book and author tables; safe to run on every open.

SCHEMA = """
-- One row per book, keyed by title
CREATE TABLE IF NOT EXISTS book (
    title      TEXT PRIMARY KEY,
    url        TEXT,
    start_date TEXT,
    end_date   TEXT
);

-- Authors follow their book on rename and delete
CREATE TABLE IF NOT EXISTS author (
    title  TEXT NOT NULL REFERENCES book (title) ON DELETE CASCADE ON UPDATE CASCADE,
    author TEXT NOT NULL,
    PRIMARY KEY (title, author)
);
"""
