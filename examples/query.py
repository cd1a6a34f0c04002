"""Query an inspection report - group records by leading discriminator."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <report.parquet> [disc_hex]")
        print("Example: python query.py report.parquet e445a52e51cb9a1d")
        sys.exit(1)

    report = Path(sys.argv[1])
    disc = sys.argv[2].lower() if len(sys.argv) > 2 else None

    con = duckdb.connect(":memory:")
    con.read_parquet(str(report)).create_view("inspections")

    if disc is None:
        print("--- Discriminators ---\n")
        df = con.execute(
            """
            SELECT discriminator, any_value(tag) AS tag, count(*) AS records,
                   min(derived_length) AS min_len, max(derived_length) AS max_len
            FROM inspections
            WHERE status = 'OK'
            GROUP BY discriminator
            ORDER BY records DESC, discriminator
            """
        ).fetchdf()
        if df.empty:
            print("No inspected records.")
        for _, row in df.iterrows():
            print(f"DISC: {row['discriminator']}  ({row['tag'] or 'unknown'})")
            print(f"  Records: {row['records']}")
            print(f"  Derived length: {row['min_len']}..{row['max_len']}")
            print()
        return

    print(f"--- Records with discriminator {disc} ---\n")
    df = con.execute(
        "SELECT \"index\", inner_discriminator, event, derived_length FROM inspections "
        "WHERE discriminator = ? ORDER BY \"index\"",
        [disc],
    ).fetchdf()
    if df.empty:
        print("No matching records.")
    for _, row in df.iterrows():
        print(f"RECORD {row['index']}: inner={row['inner_discriminator'] or '-'} event={row['event'] or '-'} len={row['derived_length']}")


if __name__ == "__main__":
    main()
