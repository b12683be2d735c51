"""Page entities with persistence-assigned identifiers."""
