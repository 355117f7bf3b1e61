from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from app.core.errors import AnalysisError
from app.modules.analysis.main import ContentAnalysisOrchestrator
from app.modules.analysis.models import AnalysisRequest


def _load_content(args: argparse.Namespace) -> str:
    if args.content and args.content_file:
        raise SystemExit("Provide either --content or --content-file, not both")
    if args.content_file:
        return Path(args.content_file).read_text(encoding="utf-8")
    if args.content:
        return args.content
    raise SystemExit("--content or --content-file is required")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="study-aid", description="Summaries, flashcards and quizzes from study content"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("analyze", help="Analyze notes text or a video link")
    a.add_argument("--content", "-c", help="Content to analyze (text or URL)")
    a.add_argument("--content-file", help="Path to a file containing the content")
    a.add_argument(
        "--type",
        "-t",
        default="notes",
        help="Content type: youtube, notes, or anything else for generic",
    )
    a.add_argument(
        "--parallel",
        action="store_true",
        help="Generate flashcards and quiz questions concurrently",
    )

    args = parser.parse_args(argv)
    if args.cmd == "analyze":
        content = _load_content(args)
        svc = ContentAnalysisOrchestrator(parallel=args.parallel or None)
        try:
            result = svc.analyze_sync(AnalysisRequest(content=content, type=args.type))
        except AnalysisError as e:
            print(json.dumps({"error": e.message}), file=sys.stderr)
            return 1
        print(json.dumps(result.model_dump(by_alias=True), indent=2))
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
