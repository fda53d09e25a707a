#!/usr/bin/env python3
"""
Command line entry point for ModelQ.

Usage:
    python -m modelq <schema>... [options]

Examples:
    python -m modelq schema/shop.yaml --package-dir models
    python -m modelq schema/ --nullable-types --workers 4
"""

from __future__ import annotations

import sys

from modelq.codegen.main import main

if __name__ == "__main__":
    sys.exit(main())
