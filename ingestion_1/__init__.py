"""Stage 1: recovering raw entries from the source dump."""
