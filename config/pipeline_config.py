"""
Pipeline Configuration
Source/output locations and loader options for the KRS structuring run.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Source & Output Locations
# =============================================================================
KRS_SOURCE_PATH = os.getenv("KRS_SOURCE_PATH", "data/raw/START HERE.html")
KRS_OUTPUT_DIR = os.getenv("KRS_OUTPUT_DIR", "data/processed")

OUTPUT_FILES = {
    'case_law': 'case-law-complete.json',
    'statutes': 'krs-codes-complete.json',
    'other': 'legal-reference-other.json',
    'summary': 'structuring-summary.json',
}

# =============================================================================
# Loader
# =============================================================================
# 'block' builds one record per delimited entry, 'positional' zips the four
# independently matched field sequences by index.
LOADER_STRATEGY = os.getenv("LOADER_STRATEGY", "block")
LOADER_STRATEGIES = ('block', 'positional')

# =============================================================================
# Case Year Plausibility Window
# =============================================================================
YEAR_MIN = int(os.getenv("YEAR_MIN", "1700"))
YEAR_MAX = int(os.getenv("YEAR_MAX", "2099"))

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
