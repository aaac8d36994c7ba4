"""
Transliterate and parse a batch of names, writing one JSON object per line.

Names come from positional arguments or from a file with one name per line.
Names that fail are written as {"input", "error", "error_type"} records so the
output stays aligned with the input.

    python scripts/transliterate_names.py "Привет" "Doctor Nguyễn Văn Minh" --culture vietnamese
    python scripts/transliterate_names.py --input names.txt --output parsed.jsonl --target-script latin
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO

from namebridge import NameTransliterator


def read_names(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def transliterate_names(
    names: Iterable[str],
    transliterator: NameTransliterator,
    source_script: Optional[str] = None,
    target_script: str = "ascii",
    locale: Optional[str] = None,
    culture: Optional[str] = None,
) -> Iterator[Dict[str, Any]]:
    for name in names:
        outcome = transliterator.try_process(name, source_script, target_script, locale, culture)
        record = {"input": name}
        record.update(outcome.to_dict())
        yield record


def write_records(records: Iterable[Dict[str, Any]], out: TextIO) -> int:
    count = 0
    for record in records:
        out.write(json.dumps(record, ensure_ascii=False) + "\n")
        count += 1
    return count


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Transliterate and parse personal names into JSON Lines.")
    parser.add_argument("names", nargs="*", help="Names to process.")
    parser.add_argument("--input", type=str, default=None, help="File with one name per line.")
    parser.add_argument("--output", type=str, default=None, help="Path to write JSON Lines to (default: stdout).")
    parser.add_argument("--source-script", type=str, default=None, help="Script hint, detected when omitted.")
    parser.add_argument("--target-script", type=str, default="ascii", help="Target script: ascii or latin.")
    parser.add_argument("--locale", type=str, default=None, help="Locale hint such as vi-VN.")
    parser.add_argument("--culture", type=str, default=None, help="Culture hint such as vietnamese.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    names = list(args.names)
    if args.input:
        names.extend(read_names(args.input))
    if not names:
        parser.error("no names given; pass names as arguments or use --input")

    records = transliterate_names(
        names,
        NameTransliterator(),
        source_script=args.source_script,
        target_script=args.target_script,
        locale=args.locale,
        culture=args.culture,
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            count = write_records(records, f)
    else:
        count = write_records(records, sys.stdout)

    logging.info(f"Wrote {count} records")
    return 0


if __name__ == "__main__":
    sys.exit(main())
