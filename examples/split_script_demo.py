#!/usr/bin/env python3
"""
Batch splitting example using sqlbatch.

This example splits a deployment script at its GO separators and shows:
1. The batches found, with their repeat counts and source offsets
2. The regions the splitter classified (text, literal, comment, separator)
3. Running every batch through a simple executor

Usage:
    python examples/split_script_demo.py [script.sql]
"""

import logging
import sys

import sqlbatch

SCRIPT = """\
/* Deployment script
   /* nested: go */ */
create table dbo.events (id int, note nvarchar(100));
go

insert dbo.events values (1, 'it''s a go');  -- GO inside a literal
go 3

select count(*) from dbo.events;
GO
"""


class PrintingExecutor:
    def execute(self, sql: str) -> None:
        print("-" * 60)
        print(sql.strip())


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    script = SCRIPT
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as f:
            script = f.read()

    batches, trace = sqlbatch.split_with_trace(script)

    print("=== Batches ===")
    for batch in batches:
        print(
            f"#{batch.index}: x{batch.repeat_count} "
            f"chars {batch.char_start}-{batch.char_end}: {batch.text.strip()!r}"
        )

    print("\n=== Regions ===")
    for region in trace.regions:
        if region.kind == "text":
            continue
        snippet = script[region.char_start : region.char_end]
        print(f"{region.kind:>9} {region.char_start:>4}-{region.char_end:<4} {snippet!r}")

    print("\n=== Execution ===")
    count = sqlbatch.execute_batches(PrintingExecutor(), script)
    print("-" * 60)
    print(f"Executed {count} batches")


if __name__ == "__main__":
    main()
