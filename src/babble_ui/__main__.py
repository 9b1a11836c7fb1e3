from __future__ import annotations
import argparse, json, logging
from collections import Counter
from zoneinfo import ZoneInfoNotFoundError
from babble import Engine
from babble.config import DEFAULT_K, DEFAULT_LOCATION, DEFAULT_SENTENCE_LENGTH, LINE_LIMIT
from babble.errors import BabbleError
from babble.irssi import load_location, read_log
from babble.loader import extract

log = logging.getLogger("babble")

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Babble CLI: Irssi log extraction and suffix-array text generation")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--generate", action="store_true", help="Generate text from a corpus --file")
    g.add_argument("--extract", action="store_true", help="Extract message text from --log-file into --out-file")
    g.add_argument("--parse", action="store_true", help="Parse --log-file and report entry counts")

    p.add_argument("--file", default=None,
                   help="Corpus file: one block of text, as written by --extract")
    p.add_argument("--sentence-length", type=int, default=DEFAULT_SENTENCE_LENGTH,
                   help="Number of phrases to generate")
    p.add_argument("-k", type=int, default=DEFAULT_K,
                   help="How many preceding words to take into account when picking the next")
    p.add_argument("--count", type=int, default=1, help="Sentences to generate")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")

    p.add_argument("--log-file", default=None, help="Irssi channel log to read")
    p.add_argument("--out-file", default=None, help="Corpus file to write")
    p.add_argument("--line-limit", type=int, default=LINE_LIMIT,
                   help="Limit number of lines to read. 0 for entire log")
    p.add_argument("--location", default=DEFAULT_LOCATION, help="Time zone of the log timestamps")
    p.add_argument("--verbose", action="store_true")
    return p

def _validate(p: argparse.ArgumentParser, args: argparse.Namespace):
    """Reject bad inputs before doing any work. Returns the resolved tz for log modes."""
    if args.generate:
        if not args.file:
            p.error("--generate requires --file")
        if args.sentence_length <= 0:
            p.error("--sentence-length must be > 0")
        if args.k <= 0:
            p.error("-k must be > 0")
        if args.count <= 0:
            p.error("--count must be > 0")
        return None

    if not args.log_file:
        p.error("--log-file is required")
    if args.extract and not args.out_file:
        p.error("--extract requires --out-file")
    if args.line_limit < 0:
        p.error("--line-limit must be >= 0")
    if not args.location:
        p.error("--location must not be empty")
    try:
        return load_location(args.location)
    except (ZoneInfoNotFoundError, ValueError) as e:
        p.error(f"Invalid location: {args.location} ({e})")

def _run_generate(args: argparse.Namespace) -> None:
    eng = Engine(seed=args.seed)
    try:
        eng.load(args.file, verbose=args.verbose)
        rows = [eng.generate(args.sentence_length, args.k) for _ in range(args.count)]
    finally:
        eng.shutdown()
    if args.json:
        print(json.dumps([{"text": r.text, "phrases": r.phrases, "fallbacks": r.fallbacks}
                          for r in rows], ensure_ascii=False, indent=2))
    else:
        for r in rows:
            print(r.text)

def _run_parse(args: argparse.Namespace, tz) -> None:
    entries = read_log(args.log_file, line_limit=args.line_limit, tz=tz)
    print(f"Parsed {len(entries)} entries.")
    if args.verbose:
        for kind, n in Counter(e.kind.value for e in entries).most_common():
            print(f"  {kind:<18} {n}")

def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    tz = _validate(p, args)
    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        if args.generate:
            _run_generate(args)
        elif args.extract:
            text = extract(args.log_file, args.out_file, line_limit=args.line_limit, tz=tz)
            log.info("Done! wrote %d chars", len(text))
        else:
            _run_parse(args, tz)
    except BabbleError as e:
        log.error("%s", e)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
