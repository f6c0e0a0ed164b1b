#!/usr/bin/env python3
"""
Populate SQLite databases from CSV files for the Health Metrics dashboard.

This script creates persistent SQLite database files from the CSV data,
matching the tables the dashboard API reads:

    biomarker.db   biomarker_data, body_composition
    fitness.db     activity_data

Usage:
    python scripts/populate_databases.py [--data-dir DIR] [--output-dir DIR]
"""
import argparse
import csv
import sqlite3
from pathlib import Path


# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent

# CSV to Database mappings; several tables may share one database file
DATABASE_CONFIGS = [
    {
        "csv_file": "biomarker_data.csv",
        "db_file": "biomarker.db",
        "table_name": "biomarker_data",
    },
    {
        "csv_file": "body_composition.csv",
        "db_file": "biomarker.db",
        "table_name": "body_composition",
    },
    {
        "csv_file": "activity_data.csv",
        "db_file": "fitness.db",
        "table_name": "activity_data",
    },
]


def sanitize_column_name(name: str) -> str:
    """Sanitize column name for SQL compatibility."""
    # Replace non-alphanumeric characters with underscores
    sanitized = "".join(c if c.isalnum() else "_" for c in name.strip())
    # Ensure it doesn't start with a number
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized.lower()


def populate_table(config: dict, data_dir: Path, output_dir: Path) -> int:
    """
    Create and populate one table from a CSV file.

    Args:
        config: Dictionary with csv_file, db_file, and table_name
        data_dir: Directory holding the CSV files
        output_dir: Directory the database files are written to

    Returns:
        Number of rows inserted
    """
    csv_path = data_dir / config["csv_file"]
    db_path = output_dir / config["db_file"]
    table_name = config["table_name"]

    # Check CSV exists
    if not csv_path.exists():
        print(f"  ERROR: CSV file not found: {csv_path}")
        return 0

    # Read CSV headers and data
    with open(csv_path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        headers = next(reader)
        sanitized_headers = [sanitize_column_name(h) for h in headers]
        rows = [row for row in reader if row]

    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()

        # Build column definitions (all TEXT; the API converts on read)
        columns = []

        # Add auto-increment id if not present
        if "id" not in sanitized_headers:
            columns.append("id INTEGER PRIMARY KEY AUTOINCREMENT")

        for header in sanitized_headers:
            columns.append(f"{header} TEXT")

        cursor.execute(f"DROP TABLE IF EXISTS {table_name}")
        cursor.execute(f"CREATE TABLE {table_name} ({', '.join(columns)})")

        placeholders = ", ".join(["?"] * len(sanitized_headers))
        insert_sql = f"INSERT INTO {table_name} ({', '.join(sanitized_headers)}) VALUES ({placeholders})"
        cursor.executemany(insert_sql, rows)
        conn.commit()

        cursor.execute(f"SELECT COUNT(*) FROM {table_name}")
        count = cursor.fetchone()[0]
    finally:
        conn.close()

    return count


def populate_databases(data_dir: Path, output_dir: Path) -> dict:
    """
    Rebuild every database file from scratch.

    Returns:
        Mapping of table name to rows inserted
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    # Remove existing database files once, before any table is written
    for db_file in sorted({config["db_file"] for config in DATABASE_CONFIGS}):
        db_path = output_dir / db_file
        if db_path.exists():
            db_path.unlink()
            print(f"  Removed existing: {db_path.name}")

    counts = {}
    for config in DATABASE_CONFIGS:
        print(f"Processing: {config['csv_file']} -> {config['db_file']}")
        counts[config["table_name"]] = populate_table(config, data_dir, output_dir)
        print(f"  Created table: {config['table_name']}")
        print(f"  Rows inserted: {counts[config['table_name']]}")
        print()
    return counts


def main(argv=None):
    """Populate all dashboard databases."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--data-dir", type=Path, default=BASE_DIR / "CSV_Data")
    parser.add_argument("--output-dir", type=Path, default=BASE_DIR)
    args = parser.parse_args(argv)

    print("=" * 60)
    print("Health Metrics Database Population Script")
    print("=" * 60)
    print(f"\nData directory: {args.data_dir}\n")

    counts = populate_databases(args.data_dir, args.output_dir)

    print("=" * 60)
    print(f"Complete! Total rows across all databases: {sum(counts.values())}")
    print("=" * 60)

    # Print database file locations
    print("\nDatabase files created:")
    for db_file in sorted({config["db_file"] for config in DATABASE_CONFIGS}):
        db_path = args.output_dir / db_file
        if db_path.exists():
            size_kb = db_path.stat().st_size / 1024
            print(f"  {db_path} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
