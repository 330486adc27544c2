import csv
import json
import sqlite3

import pytest

from termite.metrics.export import (
    DAILY_HEADER,
    MILESTONE_HEADER,
    DailyMetricRow,
    MilestoneRow,
    export_csv,
    export_json,
    gather_export_data,
)
from termite.metrics.tracker import MetricsError, ensure_schema


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    ensure_schema(connection)
    with connection:
        connection.executemany(
            "INSERT INTO daily_metrics VALUES (?, ?, ?, ?, ?, ?, ?)",
            [
                ("2024-03-02", "b", 1, 2, 3, 4, 5),
                ("2024-03-01", "z", 6, 7, 8, 9, 10),
                ("2024-03-02", "a", 11, 12, 13, 14, 15),
            ],
        )
        connection.executemany(
            "INSERT INTO milestones VALUES (?, ?, ?)",
            [("zero_1", None, 0), ("cleared_1", 1700000000, 1)],
        )
    yield connection
    connection.close()


def test_gather_orders_rows(conn):
    data = gather_export_data(conn)
    assert [(r.date, r.account_id) for r in data.daily_metrics] == [
        ("2024-03-01", "z"),
        ("2024-03-02", "a"),
        ("2024-03-02", "b"),
    ]
    assert data.daily_metrics[0] == DailyMetricRow("2024-03-01", "z", 6, 7, 8, 9, 10)
    assert data.milestones == [
        MilestoneRow("cleared_1", 1700000000, 1),
        MilestoneRow("zero_1", None, 0),
    ]


def test_export_json_round_trip(conn, tmp_path):
    target = tmp_path / "metrics.json"
    export_json(conn, target)
    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert set(loaded) == {"daily_metrics", "milestones"}
    assert loaded["daily_metrics"][1] == {
        "date": "2024-03-02",
        "account_id": "a",
        "emails_cleared": 11,
        "emails_sent": 12,
        "inbox_zeros": 13,
        "time_in_app_s": 14,
        "streak_days": 15,
    }
    assert loaded["milestones"][1] == {"id": "zero_1", "unlocked_at": None, "shown": 0}
    assert target.read_text(encoding="utf-8").endswith("\n")


def test_export_json_empty_database(tmp_path):
    connection = sqlite3.connect(":memory:")
    ensure_schema(connection)
    target = tmp_path / "empty.json"
    export_json(connection, target)
    assert json.loads(target.read_text(encoding="utf-8")) == {
        "daily_metrics": [],
        "milestones": [],
    }


def test_export_csv_layout(conn, tmp_path):
    target = tmp_path / "metrics.csv"
    export_csv(conn, target)
    with open(target, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == list(DAILY_HEADER)
    assert rows[1] == ["2024-03-01", "z", "6", "7", "8", "9", "10"]
    assert len(rows) == 1 + 3 + 1 + 1 + 2
    assert rows[4] == []
    assert rows[5] == list(MILESTONE_HEADER)
    assert rows[6] == ["cleared_1", "1700000000", "1"]
    assert rows[7] == ["zero_1", "", "0"]


def test_missing_tables_raise():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(MetricsError, match="daily_metrics"):
        gather_export_data(connection)


def test_export_csv_missing_tables_raise(tmp_path):
    connection = sqlite3.connect(":memory:")
    with pytest.raises(MetricsError, match="export csv"):
        export_csv(connection, tmp_path / "out.csv")


def test_export_json_bad_path_raises(conn, tmp_path):
    with pytest.raises(MetricsError, match="export json"):
        export_json(conn, tmp_path / "missing" / "out.json")