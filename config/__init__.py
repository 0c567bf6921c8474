"""Configuration modules for the KRS structuring pipeline."""
