"""Core engine: entities, perception, ability estimation and observation sessions."""
