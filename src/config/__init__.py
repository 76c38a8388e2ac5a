"""Runtime configuration for the chatbot Lambda."""
