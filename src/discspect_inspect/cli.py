"""discspect - hex record discriminator inspector."""
from __future__ import annotations

from pathlib import Path

import click

from discspect_core.records import RECORDS
from .const import ERRORS
from .logic import InspectError, inspect
from .report import write_report


def read_record_file(path: Path) -> list[str]:
    """One record per line. Blank lines and # comments are skipped."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"{ERRORS['E_INPUT_FILE']}: {e}")
    out: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


@click.command()
@click.argument("records", nargs=-1)
@click.option("--from-file", "from_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read additional records from a file, one per line")
@click.option("--report", type=click.Path(dir_okay=False, path_type=Path), help="Write a Parquet report")
@click.option("--fail-fast", is_flag=True, help="Stop at the first bad record")
@click.option("--verbose", is_flag=True, help="Print known tag and inner discriminator")
def main(records: tuple[str, ...], from_file: Path | None, report: Path | None, fail_fast: bool, verbose: bool) -> None:
    """Decode hex records and print their discriminators."""
    todo = list(records)
    if from_file is not None:
        todo.extend(read_record_file(from_file))
    if not todo:
        todo = list(RECORDS)

    try:
        summary = inspect(
            todo,
            echo=click.echo,
            fail_fast=fail_fast,
            verbose=verbose,
            err=lambda msg: click.echo(msg, err=True),
        )
        if report is not None and write_report(summary, report):
            click.echo(f"Report written to {report}", err=True)
    except InspectError as e:
        click.echo(f"FAIL record[{e.index}]: {e.code}: {e}", err=True)
        raise SystemExit(1)
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)

    if not summary.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
