"""Command-line interface for the Everhour client."""
