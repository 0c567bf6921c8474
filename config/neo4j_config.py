"""
Neo4j settings for the optional record loader.
The structuring pipeline itself never reads these.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Neo4j connection settings
NEO4J_URI = os.getenv("NEO4J_URI", "bolt://localhost:7687")
NEO4J_USER = os.getenv("NEO4J_USER", "neo4j")
NEO4J_PASSWORD = os.getenv("NEO4J_PASSWORD", "password")

# Database name (for Neo4j 4.0+)
NEO4J_DATABASE = os.getenv("NEO4J_DATABASE", "neo4j")

# Node labels used by the loader, one per output collection
NEO4J_LABELS = {
    'case_law': 'CaseLaw',
    'statutes': 'Statute',
    'other': 'LegalReference',
}
