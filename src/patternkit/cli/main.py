"""
Main CLI module with argument parsing and command execution.

This module provides the demonstration command line:
- ``report`` renders one of the built-in report variants
- ``visit`` sends bugs to a row of randomly picked flowers
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from patternkit._version import __version__
from patternkit.application.template.executor import TemplateExecutor
from patternkit.application.visitor.dispatcher import VisitorDispatcher
from patternkit.cli.formatters import format_output
from patternkit.config.manager import ConfigurationManager
from patternkit.config.schemas.app_schema import OUTPUT_FORMATS
from patternkit.demo.garden import BUGS, FLOWERS, flower_gen
from patternkit.domain.core.exceptions import DomainException, ValidationError
from patternkit.domain.template.variants import REPORT_STYLES, build_report
from patternkit.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="patternkit - template method and visitor demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s report --style html --title R --line a --line b
  %(prog)s report --style text --title R --trace --format table
  %(prog)s visit --count 5 --seed 42 --bug bee --bug worm
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=list(OUTPUT_FORMATS), help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    report_parser = subparsers.add_parser('report', help='Render a report variant')
    report_parser.add_argument('--style', choices=list(REPORT_STYLES), default='html',
                               help='Report variant to render')
    report_parser.add_argument('--title', required=True, help='Report title')
    report_parser.add_argument('--line', dest='lines', action='append', default=[],
                               help='Body line, may be repeated')
    report_parser.add_argument('--trace', action='store_true',
                               help='Show the step that produced each fragment')

    visit_parser = subparsers.add_parser('visit', help='Send bugs to visit flowers')
    visit_parser.add_argument('--count', type=int, default=10, help='Number of flowers')
    visit_parser.add_argument('--seed', type=int, help='Random seed for picking flowers')
    visit_parser.add_argument('--bug', dest='bugs', action='append', choices=sorted(BUGS),
                              help='Visiting bug, may be repeated (default: all)')

    return parser.parse_args(argv)


def run_report(args: argparse.Namespace) -> Dict[str, Any]:
    """Render a report and return its fragments (or step trace)."""
    variant = build_report(args.style, args.title, args.lines)
    executor = TemplateExecutor(variant.skeleton)
    if args.trace:
        return {
            "style": args.style,
            "trace": [
                {"step": step, "fragments": fragments}
                for step, fragments in executor.iter_steps(variant)
            ],
        }
    return {"style": args.style, "fragments": executor.execute(variant)}


def run_visit(args: argparse.Namespace, seed: Optional[int]) -> Dict[str, Any]:
    """Dispatch every selected bug to every generated flower."""
    if args.count < 0:
        raise ValidationError("--count must not be negative", {"count": args.count})
    dispatcher = VisitorDispatcher(FLOWERS)
    bugs = [BUGS[name]() for name in dict.fromkeys(args.bugs or sorted(BUGS))]
    for bug in bugs:
        dispatcher.register_operation(bug)

    visits = []
    for flower in flower_gen(args.count, seed):
        for bug in bugs:
            visits.append({
                "flower": flower.tag,
                "visitor": bug.name,
                "result": dispatcher.dispatch_named(flower, bug.name),
            })
    return {"visits": visits}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    if args.format:
        overrides["output_format"] = args.format

    try:
        config = ConfigurationManager(args.config, overrides).app_config
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    logger = get_logger(__name__)

    try:
        if args.command == 'report':
            data = run_report(args)
        else:
            seed = args.seed if args.seed is not None else config.demo_seed
            data = run_visit(args, seed)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = format_output(data, config.output_format)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
            if not output.endswith("\n"):
                f.write("\n")
        logger.info("Output written", path=args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
