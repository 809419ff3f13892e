"""Conversion demo CLI: walk a native path through every conversion and show each step.

Usage: python -m pathstr.cli.demo [--path TEXT | --env NAME] [--json] [--redact]
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from pathstr._types import EnvString, NativePath
from pathstr.config import LOG_LEVELS, current_dir, env_var, load_settings
from pathstr.convert import (
    env_string_to_native_path,
    env_string_to_text,
    native_path_to_env_string,
    native_path_to_text,
    text_to_env_string,
    text_to_native_path,
    to_text_exact,
)
from pathstr.logging import DataRedactor, StructuredLogger, create_logger

logger = logging.getLogger("pathstr.demo")


class StepKind(str, Enum):
    NATIVE_PATH = "NativePath"
    ENV_STRING = "EnvString"
    TEXT = "str"


class ConversionStep(BaseModel):
    """One intermediate value in the demo chain."""

    label: str = Field(description="Short name of the value")
    kind: StepKind = Field(description="Representation the value is held in")
    value: str = Field(description="Displayable text form (lossy for native values)")
    lossy: bool = Field(default=False, description="True if display text substituted invalid bytes")
    raw_hex: Optional[str] = Field(default=None, description="Native bytes as hex, native kinds only")


class DemoReport(BaseModel):
    source: str = Field(description="Where the starting path came from")
    steps: List[ConversionStep] = Field(default_factory=list)
    round_trip: bool = Field(description="Final env string holds exactly the starting bytes")


def _step(
    label: str,
    value: Union[NativePath, EnvString, str],
    redactor: Optional[DataRedactor],
) -> ConversionStep:
    if isinstance(value, str):
        kind, text, lossy, raw_hex = StepKind.TEXT, value, False, None
    else:
        if isinstance(value, NativePath):
            kind, text = StepKind.NATIVE_PATH, native_path_to_text(value)
        else:
            kind, text = StepKind.ENV_STRING, env_string_to_text(value)
        lossy = to_text_exact(value) is None
        raw_hex = value.raw.hex()
    if redactor is not None:
        text = redactor.redact_string(text)
        # hex would leak the redacted prefix
        raw_hex = None
    return ConversionStep(label=label, kind=kind, value=text, lossy=lossy, raw_hex=raw_hex)


def run_demo(
    start: Optional[NativePath] = None,
    *,
    source: str = "current directory",
    redactor: Optional[DataRedactor] = None,
    slog: Optional[StructuredLogger] = None,
) -> DemoReport:
    """Run the conversion chain starting from ``start`` (default: the working directory).

    Raises:
        OSError: If ``start`` is None and the working directory cannot be read.
    """
    if start is None:
        start = current_dir()

    text = native_path_to_text(start)
    path = text_to_native_path(text)
    env = native_path_to_env_string(path)
    path_again = env_string_to_native_path(env)
    text_again = env_string_to_text(env)
    env_again = text_to_env_string(text_again)

    chain = [
        ("start", start),
        ("text", text),
        ("path", path),
        ("env", env),
        ("path_again", path_again),
        ("text_again", text_again),
        ("env_again", env_again),
    ]
    steps = [_step(label, value, redactor) for label, value in chain]
    report = DemoReport(source=source, steps=steps, round_trip=env_again.raw == start.raw)

    if slog is not None:
        for s in steps:
            slog.info("conversion step", label=s.label, kind=s.kind.value, value=s.value, lossy=s.lossy)
        slog.info("demo finished", source=source, round_trip=report.round_trip)
    if not report.round_trip:
        logger.info("round trip was lossy for source %s", source)
    return report


def format_report(report: DemoReport) -> str:
    lines = [f"  -- conversions from {report.source} --"]
    for s in report.steps:
        marker = "  (lossy)" if s.lossy else ""
        lines.append(f"  {s.label}:{s.kind.value} = {s.value!r}{marker}")
    lines.append(f"  round trip exact: {report.round_trip}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pathstr-demo", description=__doc__.splitlines()[0])
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--path", help="Start from this path instead of the working directory")
    src.add_argument("--env", metavar="NAME", help="Start from the value of environment variable NAME")
    ap.add_argument("--json", action="store_true", default=None, help="Print the report as JSON")
    ap.add_argument("--redact", action="store_true", default=None, help="Mask home directories")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=None,
        help="Log level (default: PATHSTR_LOG_LEVEL)",
    )
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = load_settings()

    logging.basicConfig(level=args.log_level or cfg.log_level)
    as_json = cfg.demo_json if args.json is None else args.json
    redact = cfg.demo_redact if args.redact is None else args.redact
    redactor = DataRedactor() if redact else None

    start: Optional[NativePath] = None
    source = "current directory"
    if args.path is not None:
        start, source = NativePath.from_os(args.path), "--path"
    elif args.env is not None:
        value = env_var(args.env)
        if value is None:
            logger.error("environment variable %s is not set", args.env)
            return 2
        start, source = env_string_to_native_path(value), f"${args.env}"

    try:
        slog = create_logger("demo", log_dir=cfg.log_dir, enable_console=False, redactor=redactor)
    except OSError as e:
        logger.error("cannot open log directory %s: %s", cfg.log_dir, e)
        return 1

    with slog:
        try:
            report = run_demo(start, source=source, redactor=redactor, slog=slog)
        except OSError as e:
            logger.error("cannot determine current directory: %s", e)
            slog.error("current directory unavailable", error=str(e))
            return 1

    if as_json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
