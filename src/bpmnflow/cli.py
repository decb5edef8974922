"""Command line interface for bpmnflow."""
import argparse
import logging
import sys
from pathlib import Path

from lxml import etree

from .config import Config
from .generators.report_generator import ReportGenerator
from .parser.exceptions import BpmnParseError
from .workflow.analyzer import BpmnAnalyzer


def run_analyze(file_path: str, as_json: bool = False, save_path: str = None) -> int:
    """Analyze one BPMN file and print the report."""
    path = Path(file_path)
    if not path.exists():
        print(f"❌ File not found: {path}")
        return 1

    try:
        analysis = BpmnAnalyzer().analyze(path)
    except (BpmnParseError, etree.XMLSyntaxError, OSError) as e:
        print(f"❌ Error while analyzing {path}: {e}", file=sys.stderr)
        return 1

    generator = ReportGenerator()
    report = generator.generate(analysis)
    if as_json:
        print(analysis.model_dump_json(indent=2))
    else:
        print(report)

    if save_path is not None:
        if not save_path:
            Config.ensure_dirs()
            save_path = str(Config.OUTPUT_DIR / f"{path.stem}_report.txt")
        saved = generator.save(report, save_path)
        print(f"📁 Report saved: {saved}")
    return 0


def run_api_server(host: str = "0.0.0.0", port: int = 8000):
    """Run the FastAPI server."""
    import uvicorn
    from .api.main import app
    print(f"🚀 API server: http://{host}:{port}")
    print(f"📄 API docs: http://{host}:{port}/docs")
    uvicorn.run(app, host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="BPMN 2.0 analyzer - list tasks and events and reconstruct the process flow"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a BPMN file")
    analyze_parser.add_argument(
        "file",
        nargs="?",
        default=Config.DEFAULT_BPMN_FILE,
        help="BPMN file to analyze"
    )
    analyze_parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    analyze_parser.add_argument(
        "--save",
        nargs="?",
        const="",
        metavar="PATH",
        help="Also write the text report to PATH (default: output dir)"
    )

    api_parser = subparsers.add_parser("api", help="Run the FastAPI server")
    api_parser.add_argument("--host", default="0.0.0.0", help="Server host")
    api_parser.add_argument("--port", type=int, default=8000, help="Server port")

    return parser


def resolve_log_level(name: str) -> int:
    """Numeric level for ``name``, WARNING when the name is not a logging level."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    print(f"⚠️ Unknown log level {name!r}, using WARNING", file=sys.stderr)
    return logging.WARNING


def main(argv: list[str] = None) -> int:
    logging.basicConfig(
        level=resolve_log_level(Config.LOG_LEVEL),
        format="%(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "analyze":
        return run_analyze(args.file, args.json, args.save)
    if args.command == "api":
        run_api_server(args.host, args.port)
        return 0
    parser.print_help()
    return 0
