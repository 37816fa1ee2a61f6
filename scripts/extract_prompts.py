#!/usr/bin/env python3
"""
Extract scene prompts from AI assistant output without installing the package.

Usage:
    python scripts/extract_prompts.py prompts/episode1.md
    python scripts/extract_prompts.py prompts/ --json
    pbpaste | python scripts/extract_prompts.py --stdin --launch 1
"""

import sys
from pathlib import Path

# Setup paths
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from cli import main

if __name__ == "__main__":
    sys.exit(main())
