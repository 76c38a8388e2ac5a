"""Data access for the Notion databases."""
