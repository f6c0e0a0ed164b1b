"""
Unit tests for the bundled CSV data files.

These tests verify:
1. CSV files exist in the expected location
2. CSV files have the expected columns (schema validation)
3. Data values meet basic integrity constraints
4. Lab-report names resolve to catalog ids

These tests directly test the data files; no server is required.

Usage:
    pytest tests/test_health_data.py -v
"""
import csv
import pytest
from datetime import date
from pathlib import Path


def load_csv_data(csv_path: Path) -> tuple:
    """
    Load CSV file and return (columns, rows).

    Args:
        csv_path: Path to the CSV file

    Returns:
        Tuple of (column_names, list_of_row_dicts)
    """
    with open(csv_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        columns = reader.fieldnames
        rows = list(reader)
    return columns, rows


class TestCSVDataExists:
    """Verify CSV data files exist and are accessible."""

    def test_csv_exists(self, data_path, table_config):
        """Verify each table's CSV file exists."""
        csv_file = data_path / table_config.csv_filename
        assert csv_file.exists(), f"Missing CSV: {csv_file}"


class TestCSVSchemaValidation:
    """Validate CSV files have expected column schemas."""

    def test_schema(self, data_path, table_config):
        """Verify each CSV has all required columns."""
        csv_path = data_path / table_config.csv_filename

        if not csv_path.exists():
            pytest.skip(f"CSV not found: {csv_path}")

        columns, _ = load_csv_data(csv_path)
        missing = set(table_config.expected_columns) - set(columns)

        assert not missing, f"Missing columns in {table_config.csv_filename}: {missing}"


class TestCSVDataIntegrity:
    """Validate CSV data meets basic integrity constraints."""

    def test_has_data_rows(self, data_path, table_config):
        """Verify each CSV has at least some data rows."""
        csv_path = data_path / table_config.csv_filename

        if not csv_path.exists():
            pytest.skip(f"CSV not found: {csv_path}")

        _, rows = load_csv_data(csv_path)

        assert len(rows) > 0, f"No data rows in {table_config.csv_filename}"

    def test_biomarker_values_numeric(self, data_path, table_configs):
        """Verify every biomarker value parses as a number."""
        csv_path = data_path / table_configs["biomarker"].csv_filename

        if not csv_path.exists():
            pytest.skip(f"CSV not found: {csv_path}")

        _, rows = load_csv_data(csv_path)

        for row in rows:
            try:
                float(row["value"])
            except ValueError:
                pytest.fail(f"Non-numeric value '{row['value']}' for {row['biomarker_name']}")

    def test_activity_dates_iso(self, data_path, table_configs):
        """Verify activity dates are ISO formatted and unique."""
        csv_path = data_path / table_configs["activity"].csv_filename

        if not csv_path.exists():
            pytest.skip(f"CSV not found: {csv_path}")

        _, rows = load_csv_data(csv_path)
        dates = [date.fromisoformat(row["date"]) for row in rows]

        assert len(dates) == len(set(dates))

    def test_known_lab_names_resolve(self, data_path, table_configs):
        """Verify the sample lab names resolve, apart from the uncatalogued Galectin-3."""
        from health_metrics import resolve_biomarker_id

        csv_path = data_path / table_configs["biomarker"].csv_filename

        if not csv_path.exists():
            pytest.skip(f"CSV not found: {csv_path}")

        _, rows = load_csv_data(csv_path)
        unresolved = {
            row["biomarker_name"] for row in rows
            if resolve_biomarker_id(row["biomarker_name"]) is None
        }

        assert unresolved == {"Galectin-3"}
