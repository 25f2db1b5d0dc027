from __future__ import annotations

from pathlib import Path
from typing import Any

import duckdb

from randex.contracts import AuditReport


class AuditStore:
    """duckdb-backed history of statistical audit runs."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def connect(self) -> Any:
        return duckdb.connect(str(self.db_path))

    def initialize_schema(self) -> None:
        with self.connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS audit_reports (
                    report_id VARCHAR PRIMARY KEY,
                    generated_at TIMESTAMP,
                    seed BIGINT,
                    passed BOOLEAN
                );

                CREATE TABLE IF NOT EXISTS audit_checks (
                    report_id VARCHAR,
                    name VARCHAR,
                    statistic DOUBLE,
                    threshold DOUBLE,
                    samples INTEGER,
                    passed BOOLEAN,
                    detail VARCHAR,
                    PRIMARY KEY(report_id, name)
                );
                """
            )

    def record(self, report: AuditReport) -> None:
        self.initialize_schema()
        with self.connect() as conn:
            conn.execute(
                "INSERT INTO audit_reports VALUES (?, ?, ?, ?)",
                [report.report_id, report.generated_at.replace(tzinfo=None), report.seed, report.passed],
            )
            for check in report.checks:
                conn.execute(
                    "INSERT INTO audit_checks VALUES (?, ?, ?, ?, ?, ?, ?)",
                    [
                        report.report_id,
                        check.name,
                        check.statistic,
                        check.threshold,
                        check.samples,
                        check.passed,
                        check.detail,
                    ],
                )

    def pass_rates(self) -> dict[str, float]:
        self.initialize_schema()
        with self.connect() as conn:
            rows = conn.execute(
                """
                SELECT name, AVG(CASE WHEN passed THEN 1.0 ELSE 0.0 END)
                FROM audit_checks
                GROUP BY name
                ORDER BY name
                """
            ).fetchall()
        return {name: float(rate) for name, rate in rows}

    def report_count(self) -> int:
        self.initialize_schema()
        with self.connect() as conn:
            return int(conn.execute("SELECT COUNT(*) FROM audit_reports").fetchone()[0])

    def export(self, output_dir: Path) -> list[Path]:
        self.initialize_schema()
        output_dir.mkdir(parents=True, exist_ok=True)
        outputs: list[Path] = []
        with self.connect() as conn:
            outputs.extend(self._export_table(conn, "audit_reports", output_dir / "audit_reports"))
            outputs.extend(self._export_table(conn, "audit_checks", output_dir / "audit_checks"))
        return outputs

    def _export_table(self, conn: Any, table: str, stem: Path) -> list[Path]:
        csv_path = stem.with_suffix(".csv")
        parquet_path = stem.with_suffix(".parquet")
        conn.execute(f"COPY (SELECT * FROM {table}) TO '{csv_path.as_posix()}' (HEADER, DELIMITER ',')")
        conn.execute(f"COPY (SELECT * FROM {table}) TO '{parquet_path.as_posix()}' (FORMAT PARQUET)")
        return [csv_path, parquet_path]
