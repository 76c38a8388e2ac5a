"""Lambda handlers for the chatbot HTTP API."""
