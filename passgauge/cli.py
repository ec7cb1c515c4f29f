"""CLI for PassGauge: score a password and show the checklist and suggestions."""

import argparse
import json
import logging
import sys
from getpass import getpass

from rich import print
from rich.panel import Panel
from rich.table import Table

from .config import configure_logging, load_config
from .presenter import present
from .wordlist import build_analyzer

logger = logging.getLogger(__name__)


def _bar(width: float, cells: int = 28) -> str:
    filled = int(round(width / 100 * cells))
    return "█" * filled + "░" * (cells - filled)


def cmd_score(args):
    pw = args.password
    if pw is None:
        pw = getpass("Password to evaluate (input hidden): ")

    cfg = load_config()
    analyzer = build_analyzer(args.wordlist or cfg.get("wordlist_path"))
    report = analyzer.analyze(pw)
    logger.debug("Scored password: strength=%s score=%d", report.strength.value, report.score)

    if args.json:
        sys.stdout.write(json.dumps(report.to_dict()) + "\n")
        return 0

    if pw == "":
        print("[yellow]Enter a password to see its strength.[/yellow]")
        return 0

    view = present(report)
    header = f"[{view.rich_style}]{view.label}[/{view.rich_style}] — {view.score} / {report.max_score}"
    body = f"[{view.rich_style}]{_bar(view.bar_width)}[/{view.rich_style}] {view.bar_width:.0f}%"
    print(Panel(body, title=header))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("", width=2)
    table.add_column("Requirement")
    for item in view.checklist:
        mark = "[green]✓[/green]" if item.satisfied else "[dim]•[/dim]"
        table.add_row(mark, item.caption)
    print(table)

    if view.show_feedback:
        print("\n[bold]Suggestions:[/bold]")
        for s in view.suggestions:
            print(f" • {s}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog="passgauge")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, nargs="?", help="Password to evaluate (wrap in quotes; omit to be prompted)")
    sc.add_argument("--json", action="store_true", help="Print the raw report as JSON")
    sc.add_argument("--wordlist", "-w", type=str, help="Extra common-password file (one per line)")
    sc.set_defaults(func=cmd_score)

    args = parser.parse_args(argv)
    configure_logging(load_config())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
