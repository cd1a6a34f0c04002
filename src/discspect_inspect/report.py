from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .logic import InspectSummary

SCHEMA = pa.schema(
    [
        ("index", pa.int32()),
        ("record", pa.string()),
        ("status", pa.string()),
        ("length", pa.int32()),
        ("discriminator", pa.string()),
        ("derived_length", pa.int32()),
        ("tag", pa.string()),
        ("inner_discriminator", pa.string()),
        ("event", pa.string()),
        ("detail", pa.string()),
    ]
)


def report_rows(summary: InspectSummary) -> list[dict]:
    rows: list[dict] = []
    for ins in summary.inspections:
        rows.append(
            {
                "index": ins.index,
                "record": ins.record,
                "status": "OK",
                "length": ins.length,
                "discriminator": ins.disc_hex(),
                "derived_length": ins.derived_length,
                "tag": ins.tag,
                "inner_discriminator": ins.inner_discriminator.hex() if ins.inner_discriminator is not None else None,
                "event": ins.event,
                "detail": None,
            }
        )
    for e in summary.errors:
        rows.append(
            {
                "index": e.index,
                "record": e.record,
                "status": e.code,
                "length": None,
                "discriminator": None,
                "derived_length": None,
                "tag": None,
                "inner_discriminator": None,
                "event": None,
                "detail": e.detail,
            }
        )
    return sorted(rows, key=lambda r: r["index"])


def write_report(summary: InspectSummary, path: Path) -> bool:
    """Write one Parquet row per inspected record. Returns False if nothing was written."""
    rows = report_rows(summary)
    if not rows:
        return False

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(rows, columns=SCHEMA.names)
    df["length"] = df["length"].astype("Int32")
    df["derived_length"] = df["derived_length"].astype("Int32")
    table = pa.Table.from_pandas(df, schema=SCHEMA, preserve_index=False)
    pq.write_table(table, path)
    return True
