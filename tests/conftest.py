"""
Pytest fixtures for Health Metrics tests.
"""
import os
import sys
import csv
import sqlite3
import pytest
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

# Ensure src/ and the project root are on sys.path so tests can import
# health_metrics and the dashboard server package.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()


# ============================================================================
# Database Fixtures
# ============================================================================

@dataclass
class TableConfig:
    """Configuration for one dashboard table."""
    table_name: str
    csv_filename: str
    db_filename: str
    expected_columns: list


DASHBOARD_TABLES = {
    "biomarker": TableConfig(
        table_name="biomarker_data",
        csv_filename="biomarker_data.csv",
        db_filename="biomarker.db",
        expected_columns=[
            "test_id", "test_date", "biomarker_name", "value", "unit",
            "lab_source", "notes"
        ]
    ),
    "body_composition": TableConfig(
        table_name="body_composition",
        csv_filename="body_composition.csv",
        db_filename="biomarker.db",
        expected_columns=[
            "scan_date", "body_fat_percent", "lean_mass", "fat_mass",
            "bone_mineral_content", "visceral_fat", "bone_density_t_score", "almi"
        ]
    ),
    "activity": TableConfig(
        table_name="activity_data",
        csv_filename="activity_data.csv",
        db_filename="fitness.db",
        expected_columns=[
            "date", "data_source", "hrv", "resting_heart_rate", "sleep_hours",
            "sleep_score", "sleep_consistency", "strain", "recovery", "steps"
        ]
    ),
}


@pytest.fixture
def data_path():
    """Return the path to the CSV data directory."""
    base_path = os.environ.get("DATA_PATH", str(Path(__file__).parent.parent))
    return Path(base_path) / "CSV_Data"


@pytest.fixture
def table_configs():
    """Return all dashboard table configurations."""
    return DASHBOARD_TABLES


@pytest.fixture(params=list(DASHBOARD_TABLES.keys()))
def table_config(request):
    """Parametrized fixture for testing each dashboard table."""
    return DASHBOARD_TABLES[request.param]


def load_table(conn: sqlite3.Connection, config: TableConfig, csv_path: Path) -> None:
    """Create a TEXT-column table from a CSV file."""
    cursor = conn.cursor()
    with open(csv_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        columns = reader.fieldnames

        create_sql = f"CREATE TABLE {config.table_name} ({', '.join(f'{col} TEXT' for col in columns)})"
        cursor.execute(create_sql)

        placeholders = ', '.join('?' * len(columns))
        insert_sql = f"INSERT INTO {config.table_name} VALUES ({placeholders})"
        for row in reader:
            cursor.execute(insert_sql, [row[col] for col in columns])
    conn.commit()


@pytest.fixture
def database_dir(tmp_path, data_path):
    """
    Directory holding biomarker.db and fitness.db built from CSV_Data.
    """
    for config in DASHBOARD_TABLES.values():
        csv_path = data_path / config.csv_filename
        if not csv_path.exists():
            pytest.skip(f"CSV file not found: {csv_path}")

        conn = sqlite3.connect(tmp_path / config.db_filename)
        try:
            load_table(conn, config, csv_path)
        finally:
            conn.close()

    return tmp_path


@pytest.fixture
def settings(database_dir):
    """Settings pointing at the temporary databases."""
    from server.dashboard_api.config import Settings

    return Settings(data_path=str(database_dir), patient_age=40, patient_sex="male")


@pytest.fixture
def health_data(settings):
    """HealthData loaded from the temporary databases."""
    from server.dashboard_api.database import DatabaseManager
    from server.dashboard_api.services.snapshot_loader import SnapshotLoader

    return SnapshotLoader(DatabaseManager(settings), settings).load()


@pytest.fixture
def client(health_data, settings):
    """TestClient with the data and settings dependencies overridden."""
    from fastapi.testclient import TestClient
    from server.dashboard_api.config import get_settings
    from server.dashboard_api.main import app
    from server.dashboard_api.services.snapshot_loader import get_health_data

    app.dependency_overrides[get_health_data] = lambda: health_data
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


# ============================================================================
# Biomarker Fixtures
# ============================================================================

@pytest.fixture
def phenoage_inputs():
    """The nine PhenoAge markers for a healthy 40-year-old."""
    return {
        "albumin": 4.5,
        "creatinine": 0.9,
        "glucose": 85,
        "crp": 0.5,
        "lymphocytePercent": 30,
        "mcv": 88,
        "rdw": 12.5,
        "alkalinePhosphatase": 60,
        "wbc": 5.5,
    }


@pytest.fixture
def lipid_panel():
    """A basic lipid panel."""
    return {
        "totalCholesterol": 200,
        "ldl": 120,
        "hdl": 50,
        "triglycerides": 100,
    }

