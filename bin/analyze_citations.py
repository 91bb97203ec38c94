#!/usr/bin/env python3
"""
Citation Density CLI

Script entry point for running from a source checkout:

    python bin/analyze_citations.py Cit-HepTh.txt
    python bin/analyze_citations.py --help
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from citegraph.cli.analyze_citations import main


if __name__ == "__main__":
    sys.exit(main())
