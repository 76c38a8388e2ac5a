"""Business logic services used by handlers.

Services are imported lazily by handlers so a missing Notion configuration
only fails the request that needs it, not the module import.
"""
