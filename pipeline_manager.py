import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from config.legal_tables import DEFAULT_TABLES, HeuristicTables
from config.pipeline_config import (
    KRS_OUTPUT_DIR,
    KRS_SOURCE_PATH,
    LOADER_STRATEGIES,
    LOADER_STRATEGY,
    LOG_FORMAT,
    LOG_LEVEL,
    OUTPUT_FILES,
    YEAR_MAX,
    YEAR_MIN,
)
from extraction_2.caselaw_pipeline import CaseLawPipeline
from extraction_2.cross_references import extract_krs_references
from extraction_2.entry_classifier import classify_entry
from extraction_2.models import (
    KIND_CASE_LAW,
    KIND_OTHER,
    KIND_STATUTE,
    CaseLawEntry,
    OtherEntry,
    StatuteEntry,
)
from extraction_2.statutory_extraction import KRSStatuteParser
from extraction_2.tag_classifier import tag_entry
from ingestion_1.load_corpus import CorpusLoadError, RawEntry, load_corpus
from ingestion_1.run_ingestion import read_source
from modeling_3.serializer import PipelineResult, serialize_results

logger = logging.getLogger(__name__)

StructuredEntry = Union[CaseLawEntry, StatuteEntry, OtherEntry]


def structure_entry(entry: RawEntry, kind: str, tables: HeuristicTables,
                    case_pipeline: CaseLawPipeline,
                    statute_parser: KRSStatuteParser) -> Optional[StructuredEntry]:
    """
    Structure one classified entry.

    Cross references and tags are computed once, whatever the branch.

    Returns:
        The structured record, or None if the entry is dropped
    """
    if kind not in (KIND_STATUTE, KIND_CASE_LAW, KIND_OTHER):
        return None

    references = extract_krs_references(entry.title, entry.content)
    tags = tag_entry(entry.title, entry.content, tables.tag_catalogue)

    if kind == KIND_STATUTE:
        return statute_parser.parse(entry, references, tags)
    if kind == KIND_CASE_LAW:
        return case_pipeline.structure(entry, references, tags)
    return OtherEntry(
        title=entry.title,
        content=entry.content,
        category=entry.category,
        tags=tags,
        related_codes=references
    )


def run_pipeline(source_text: str, tables: HeuristicTables = DEFAULT_TABLES,
                 strategy: str = 'block') -> PipelineResult:
    """
    Core transform: source dump in, three collections and a summary out.

    Deterministic and free of I/O.

    Raises:
        CorpusLoadError: On fatal input-level failures
    """
    loaded = load_corpus(source_text, strategy=strategy)

    case_pipeline = CaseLawPipeline(tables)
    statute_parser = KRSStatuteParser()

    structured = []
    dropped = 0
    discarded_cases = 0

    for entry in loaded.entries:
        kind = classify_entry(entry)
        record = structure_entry(entry, kind, tables, case_pipeline, statute_parser)
        if record is None:
            dropped += 1
            continue
        if isinstance(record, CaseLawEntry) and not record.has_substance():
            discarded_cases += 1
            continue
        structured.append(record)

    if discarded_cases:
        logger.warning(f"Discarded {discarded_cases} case-law entries without caption or sections")
    logger.info(f"Structured {len(structured)} entries, dropped {dropped}")

    return serialize_results(
        structured,
        total_entries=len(loaded.entries),
        dropped=dropped,
        discarded_cases=discarded_cases,
        field_mismatches=loaded.mismatch_count,
        loader_strategy=loaded.strategy
    )


def write_outputs(result: PipelineResult, output_dir: str) -> dict:
    """
    Write the three collections and the summary as JSON files.

    Returns:
        Mapping of output name to written path
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    payloads = dict(result.collections())
    payloads['summary'] = result.summary

    written = {}
    for name, payload in payloads.items():
        path = out / OUTPUT_FILES[name]
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        written[name] = str(path)
        logger.info(f"Saved output to: {path}")
    return written


def ingest_outputs(result: PipelineResult) -> dict:
    """Hand the collections to the Neo4j record loader."""
    from config.neo4j_config import NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD, NEO4J_DATABASE
    from modeling_3.record_ingestor import LegalRecordIngestor

    ingestor = LegalRecordIngestor(NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD, NEO4J_DATABASE)
    try:
        return ingestor.ingest_all(result.collections())
    finally:
        ingestor.close()


def print_summary(summary: dict):
    print(f"\n{'='*70}")
    print("Structuring Statistics:")
    print(f"  Total entries:   {summary['total_entries']}")
    print(f"  Case Law:        {summary['case_law_total']}")
    print(f"  KRS Codes:       {summary['statute_total']}")
    print(f"  Other:           {summary['other_total']}")
    print(f"  Dropped:         {summary['dropped']}")
    print(f"  Discarded cases: {summary['discarded_cases']}")
    if summary['field_mismatches']:
        print(f"  [WARN] Field mismatches: {summary['field_mismatches']}")

    print("\n  Case Law by Category:")
    for category, count in list(summary['cases_by_category'].items())[:10]:
        print(f"    {category or '(none)'}: {count}")

    print("\n  KRS by Chapter:")
    for chapter, count in list(summary['statutes_by_chapter'].items())[:10]:
        print(f"    {chapter or '(none)'}: {count}")
    print(f"{'='*70}")


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="KRS Legal Corpus Structuring Pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Structure the default source dump into data/processed
  python pipeline_manager.py

  # Use positional field alignment instead of entry blocks
  python pipeline_manager.py --strategy positional

  # Print statistics only, write nothing
  python pipeline_manager.py --input dump.html --dry-run

  # Structure, write JSON and load into Neo4j
  python pipeline_manager.py --ingest
        """
    )
    parser.add_argument("--input", default=KRS_SOURCE_PATH, help="Source dump to structure")
    parser.add_argument("--output-dir", default=KRS_OUTPUT_DIR, help="Directory for JSON outputs")
    parser.add_argument("--strategy", choices=LOADER_STRATEGIES, default=LOADER_STRATEGY,
                        help="Entry recovery strategy")
    parser.add_argument("--dry-run", action="store_true", help="Do not write output files")
    parser.add_argument("--ingest", action="store_true", help="Load results into Neo4j")

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)

    tables = HeuristicTables(year_bounds=(YEAR_MIN, YEAR_MAX))

    try:
        print("\n" + "=" * 70)
        print(f"STEP 1: Structuring {args.input}")
        print("=" * 70)
        result = run_pipeline(read_source(args.input), tables=tables, strategy=args.strategy)
        print_summary(result.summary)

        if not args.dry_run:
            print("\n" + "=" * 70)
            print("STEP 2: Writing Outputs")
            print("=" * 70)
            for name, path in write_outputs(result, args.output_dir).items():
                print(f"  [OK] {name}: {path}")

        if args.ingest:
            print("\n" + "=" * 70)
            print("STEP 3: Loading into Neo4j")
            print("=" * 70)
            for name, stats in ingest_outputs(result).items():
                print(f"  {name}: {stats['successful']} successful, {stats['failed']} failed")

        print("\n" + "=" * 70)
        print("[OK] Pipeline completed successfully!")
        print("=" * 70)
        return 0

    except CorpusLoadError as e:
        print(f"\n\n[FAIL] Cannot structure source: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n[WARN] Pipeline interrupted by user")
        return 1
    except Exception as e:
        print(f"\n\n[FAIL] Pipeline failed: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
