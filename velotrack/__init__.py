"""velotrack: GPS track ingestion for the bike maintenance app."""

__version__ = "0.1.0"
