"""
LegalRecordIngestor: Loads structured KRS records into Neo4j
============================================================

Bulk-upserts the three output collections of the structuring pipeline:
- :CaseLaw nodes (keyed on full_title)
- :Statute nodes (keyed on code + title)
- :LegalReference nodes (keyed on title)
- [:CITES] edges to :Statute {code} nodes; ghost nodes are created for codes
  that have no statute entry yet, and a later upsert of the real statute
  takes over the ghost's edges and removes it

Each record is written on its own; a failing record is counted and logged
and the batch carries on.
"""

from typing import Dict, List, Optional
from neo4j import GraphDatabase  # pyright: ignore[reportMissingImports]
import logging

from config.neo4j_config import NEO4J_LABELS

logger = logging.getLogger(__name__)

CASE_LAW_QUERY = f"""
MERGE (c:{NEO4J_LABELS['case_law']} {{full_title: $full_title}})
SET c.case_name = $case_name,
    c.citation = $citation,
    c.year = $year,
    c.court = $court,
    c.facts = $facts,
    c.issue = $issue,
    c.holding = $holding,
    c.discussion = $discussion,
    c.full_text = $full_text,
    c.category = $category,
    c.tags = $tags,
    c.related_codes = $related_codes,
    c.importance = $importance
RETURN elementId(c) AS node_id
"""

# A ghost left by an earlier citation of this code is absorbed: its incoming
# CITES edges move to the real statute and the ghost is deleted
STATUTE_QUERY = f"""
MERGE (s:{NEO4J_LABELS['statutes']} {{code: $code, title: $title}})
SET s.chapter = $chapter,
    s.full_text = $full_text,
    s.category = $category,
    s.tags = $tags,
    s.related_codes = $related_codes,
    s.ghost = false
WITH s
CALL {{
    WITH s
    MATCH (n)-[r:CITES]->(g:{NEO4J_LABELS['statutes']} {{code: s.code, ghost: true}})
    MERGE (n)-[:CITES]->(s)
    DELETE r
}}
WITH s
OPTIONAL MATCH (g:{NEO4J_LABELS['statutes']} {{code: s.code, ghost: true}})
DETACH DELETE g
RETURN DISTINCT elementId(s) AS node_id
"""

OTHER_QUERY = f"""
MERGE (r:{NEO4J_LABELS['other']} {{title: $title}})
SET r.content = $content,
    r.category = $category,
    r.tags = $tags,
    r.related_codes = $related_codes
RETURN elementId(r) AS node_id
"""

# Link a node to the statutes it cites; unknown codes become ghost statutes
CITES_QUERY = f"""
MATCH (n) WHERE elementId(n) = $node_id
UNWIND $codes AS code
MERGE (s:{NEO4J_LABELS['statutes']} {{code: code}})
ON CREATE SET s.title = code, s.ghost = true
MERGE (n)-[:CITES]->(s)
"""

# Fields that must be present for each collection before any write
REQUIRED_FIELDS = {
    'case_law': ('full_title', 'full_text'),
    'statutes': ('code', 'title', 'full_text'),
    'other': ('title', 'content'),
}

QUERIES = {
    'case_law': CASE_LAW_QUERY,
    'statutes': STATUTE_QUERY,
    'other': OTHER_QUERY,
}


class LegalRecordIngestor:
    """
    Ingests pipeline output collections into Neo4j.

    Implements:
    - Phase A: Idempotent node upsert (MERGE per record)
    - Phase B: Citation linking with ghost statute nodes
    """

    def __init__(self, uri: str, user: str, password: str, database: str = "neo4j"):
        """
        Initialize LegalRecordIngestor with Neo4j connection.

        Args:
            uri: Neo4j connection URI (e.g., "bolt://localhost:7687")
            user: Neo4j username
            password: Neo4j password
            database: Database name (default: "neo4j")
        """
        self.driver = GraphDatabase.driver(uri, auth=(user, password))
        self.database = database

    def close(self):
        """Close Neo4j connection."""
        self.driver.close()

    def ingest_all(self, collections: Dict[str, List[Dict]]) -> Dict[str, Dict]:
        """
        Ingest every collection. Statutes go first so citations from cases and
        references attach to real statute nodes where they exist.

        Args:
            collections: {'case_law': [...], 'statutes': [...], 'other': [...]}

        Returns:
            Per-collection statistics from ingest_collection
        """
        stats = {}
        for name in ('statutes', 'case_law', 'other'):
            stats[name] = self.ingest_collection(name, collections.get(name, []))
        return stats

    def ingest_collection(self, name: str, records: List[Dict]) -> Dict:
        """
        Upsert one collection record by record.

        Args:
            name: 'case_law', 'statutes' or 'other'
            records: JSON-ready records from the serializer

        Returns:
            {'successful': int, 'failed': int, 'errors': List[Dict]}
        """
        if name not in QUERIES:
            raise ValueError(f"Unknown collection: {name}")

        stats = {'successful': 0, 'failed': 0, 'errors': []}
        if not records:
            logger.warning(f"No {name} records to ingest")
            return stats

        logger.info(f"Ingesting {len(records)} {name} records into Neo4j")

        with self.driver.session(database=self.database) as session:
            for record in records:
                key = self._record_key(name, record)
                error = self._validate(name, record)
                if error is None:
                    try:
                        self._upsert(session, name, record)
                    except Exception as e:
                        error = str(e)

                if error is None:
                    stats['successful'] += 1
                else:
                    logger.warning(f"Failed to ingest {name} record '{key[:60]}': {error}")
                    stats['errors'].append({'record': key, 'error': error})
                    stats['failed'] += 1

        logger.info(f"Ingestion complete for {name}: {stats['successful']} ok, {stats['failed']} failed")
        return stats

    def _upsert(self, session, name: str, record: Dict):
        """Write one record and its citation edges."""
        written = session.run(QUERIES[name], record).single()
        if written is None:
            raise RuntimeError("MERGE returned no node")

        codes = record.get('related_codes') or []
        if codes:
            session.run(CITES_QUERY, {'node_id': written['node_id'], 'codes': codes})

    @staticmethod
    def _validate(name: str, record: Dict) -> Optional[str]:
        missing = [f for f in REQUIRED_FIELDS[name] if not record.get(f)]
        if missing:
            return f"Missing required field(s): {', '.join(missing)}"
        return None

    @staticmethod
    def _record_key(name: str, record: Dict) -> str:
        if name == 'case_law':
            return str(record.get('full_title') or record.get('case_name') or '<untitled>')
        if name == 'statutes':
            return f"KRS {record.get('code', '?')} {record.get('title', '')}".strip()
        return str(record.get('title') or '<untitled>')
