#!/usr/bin/env python3
"""Analyze a job posting from the command line.

    python run_analysis.py posting.txt
    python run_analysis.py --url https://jobs.lever.co/acme/123 --resume cv.pdf
    python run_analysis.py --example poor --json
    cat posting.txt | python run_analysis.py -
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from hirelens.config import load_settings
from hirelens.exceptions import HirelensError, InputValidationError
from hirelens.log import get_logger, set_console_stream

log = get_logger(__name__)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Score a job posting's quality and optionally check a resume.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("file", nargs="?", help="posting text file, or - for stdin")
    src.add_argument("--url", help="fetch the posting from a job board page")
    src.add_argument("--example", help="use a built-in example: excellent, average, poor")
    p.add_argument("--resume", type=Path, help="PDF resume to run the ATS check against")
    p.add_argument("--json", action="store_true", help="print JSON instead of Markdown")
    p.add_argument("--save", action="store_true", help="also write the report under reports/")
    return p


def _read_posting(args, settings) -> str:
    if args.example:
        from hirelens.samples import get_example

        try:
            return get_example(args.example)
        except KeyError as exc:
            raise InputValidationError(str(exc.args[0])) from exc
    if args.url:
        from hirelens.service import grab_page_text

        return grab_page_text(args.url, settings)
    if args.file == "-":
        return sys.stdin.read()
    path = Path(args.file)
    if not path.is_file():
        raise InputValidationError(f"No such file: {path}")
    return path.read_text(encoding="utf-8", errors="ignore")


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    # stdout carries the report or JSON only.
    set_console_stream("stderr")
    settings = load_settings()

    try:
        from hirelens.llm import build_client
        from hirelens.report import build_analysis_report, build_ats_report, write_report
        from hirelens.service import analyze_posting, check_resume

        job_text = _read_posting(args, settings)
        if not job_text.strip():
            raise InputValidationError("Job posting text cannot be empty.")
        client = build_client(settings)

        analysis = analyze_posting(job_text, client, settings)
        payload: dict = {"analysis": analysis.to_dict()}
        report = build_analysis_report(analysis)

        if args.resume:
            from hirelens.pdf_text import guess_content_type

            if not args.resume.is_file():
                raise InputValidationError(f"No such file: {args.resume}")
            match = check_resume(
                args.resume.read_bytes(), guess_content_type(args.resume), job_text, client, settings
            )
            payload["ats"] = match.to_dict()
            report += "\n---\n\n" + build_ats_report(match)
    except HirelensError as exc:
        log.error("%s", exc)
        return 1

    print(json.dumps(payload, indent=2) if args.json else report)
    if args.save:
        write_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
