"""
Write the built-in reference tables to a JSON file.

The file can be edited and pointed to with REFERENCE_DATA_PATH to override
limits, bank rates or asset CAGRs without a code change.

Usage: python scripts/export_reference_data.py [output.json]
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.reference.tables import ReferenceFile


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "reference_data.json"

    tables = ReferenceFile()
    with open(path, "w", encoding="utf-8") as f:
        f.write(tables.model_dump_json(indent=2))

    print(f"Wrote {len(tables.banks)} bank lists and {len(tables.assets)} assets to {path}")


if __name__ == "__main__":
    main()
