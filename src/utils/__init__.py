"""Shared helpers: logging, errors, responses and Notion property parsing."""
