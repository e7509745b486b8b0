"""User directory: registration, listing and profiles."""
