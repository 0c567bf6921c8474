import argparse
import logging
from pathlib import Path

from ingestion_1.load_corpus import CorpusLoadError, CorpusLoadResult, load_corpus
from config.pipeline_config import KRS_SOURCE_PATH, LOADER_STRATEGY, LOADER_STRATEGIES

logger = logging.getLogger(__name__)


def read_source(path: str) -> str:
    """
    Read the source dump as UTF-8 text, returned exactly as stored.

    Raises:
        CorpusLoadError: If the file is missing or unreadable
    """
    source = Path(path)
    try:
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"Failed to read source file: {source}. Error: {e}") from e

    logger.info(f"Read {len(text)} chars from {source}")
    return text


def run_corpus(path: str, strategy: str = LOADER_STRATEGY) -> CorpusLoadResult:
    """Read the source file and recover its raw entries."""
    return load_corpus(read_source(path), strategy=strategy)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Raw corpus extraction")
    parser.add_argument("--input", default=KRS_SOURCE_PATH, help="Source dump to read")
    parser.add_argument("--strategy", choices=LOADER_STRATEGIES, default=LOADER_STRATEGY)

    args = parser.parse_args()

    print("=== INGESTION: RAW ENTRIES ===")
    result = run_corpus(args.input, strategy=args.strategy)
    print(f"Found {len(result.entries)} total entries")
    print(f"Field counts: {result.field_counts}")
    if result.mismatch_count:
        print(f"[WARN] {result.mismatch_count} field mismatch(es) padded")
