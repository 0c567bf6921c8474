"""Stage 3: partitioning, summarizing and loading structured records."""
