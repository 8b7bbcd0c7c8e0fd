from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from mcp_cabrillo_server.core.bandplan import lookup_band
from mcp_cabrillo_server.core.config import resolve_server_config
from mcp_cabrillo_server.core.errors import CabrilloError
from mcp_cabrillo_server.core.log_service import load_log
from mcp_cabrillo_server.core.models import ContactRecord, LogRecord
from mcp_cabrillo_server.core.schemas import ContactModel, LogSummaryModel


def _fmt_contact(c: ContactRecord) -> str:
    band = lookup_band(c.frequency)
    band_s = band.value if band is not None else "?"
    ts = c.timestamp.strftime("%Y-%m-%d %H%M")
    return (
        f"{ts} {band_s:>5} {c.mode.value:<5} {c.sent_call} {c.sent_exchange} "
        f"-> {c.received_call} {c.received_exchange}"
    )


def _print_summary(record: LogRecord, *, show_contacts: bool) -> None:
    print(f"Cabrillo {record.format_version}")
    print(f"Callsign: {record.callsign or '-'}")
    print(f"Contest:  {record.contest or '-'}")
    if record.operators:
        print(f"Operators: {', '.join(record.operators)}")
    if record.unknown_tags:
        print(f"Unknown tags: {', '.join(sorted(record.unknown_tags))}")

    if show_contacts:
        for c in record.contacts:
            print(_fmt_contact(c))

    print(f"\nFound {len(record.contacts)} contacts ({len(record.ignored_contacts)} ignored).")


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint: parse a Cabrillo file and print a summary."""
    p = argparse.ArgumentParser(description="Parse and validate a Cabrillo contest log.")
    p.add_argument("log_path")
    p.add_argument("--contacts", action="store_true", help="Print every QSO")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the parsed log as JSON")
    args = p.parse_args(argv)
    path = Path(args.log_path)

    try:
        cfg = resolve_server_config()
        record = asyncio.run(load_log(path, encoding=cfg.encoding))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except CabrilloError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.as_json:
        out = LogSummaryModel.from_record(record).model_dump()
        if args.contacts:
            out["contacts"] = [ContactModel.from_contact(c).model_dump() for c in record.contacts]
        print(json.dumps(out, indent=2))
        return

    _print_summary(record, show_contacts=args.contacts)


if __name__ == "__main__":
    main()
