#!/usr/bin/env python3
"""
Export Contract JSON Schemas

This script exports the JSON-Schema documents of the public contract shapes
(Config, Message, Response, GenerationStats) in both JSON and YAML formats.

Usage:
    python scripts/export_schemas.py
    python scripts/export_schemas.py --output-dir build/schemas

Outputs (default):
    - docs/schemas/<shape>.json
    - docs/schemas/<shape>.yaml
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from openrouter_contract.services.schema_export import export_schemas  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Export the contract's JSON-Schema documents"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "docs" / "schemas",
        help="Directory to write the schema files to",
    )
    args = parser.parse_args()

    written = export_schemas(args.output_dir)

    print(f"Exported {len(written)} schema files to {args.output_dir}")
    for path in written:
        print(f"   {path.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
