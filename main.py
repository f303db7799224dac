"""
Main entry point for the screening prompt compiler.
Provides a CLI for compiling an agent file into its call script.
"""
import json
import sys

from logging_config import setup_logging
from prompts import build_prompt, build_preview_prompt, build_evaluation_tool
from specs import Pillar, get_pillar_label, load_agent_from_json, validate_agent


def print_separator():
    print("=" * 60, file=sys.stderr)


def print_pillars():
    print("\nAvailable Pillars:")
    for pillar in Pillar:
        print(f"  - {pillar.value} ({get_pillar_label(pillar)})")


def compile_agent(
    agent_path: str,
    candidate: str = None,
    company_context_path: str = None,
    show_evaluation: bool = False,
):
    """Compile an agent JSON file and print the result to stdout."""
    agent = load_agent_from_json(agent_path)

    for warning in validate_agent(agent):
        print(f"[WARNING] {warning}", file=sys.stderr)

    company_context = None
    if company_context_path:
        with open(company_context_path, "r", encoding="utf-8") as f:
            company_context = f.read()

    if candidate:
        prompt = build_prompt(agent, candidate, company_context)
    else:
        prompt = build_preview_prompt(agent)

    print(prompt)

    if show_evaluation:
        print_separator()
        print(json.dumps(build_evaluation_tool(agent.pillars).to_payload(), indent=2))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Screening Prompt Compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py agent.json                          # Preview with placeholders
  python main.py agent.json --candidate "Jane Doe"   # Compile for a candidate
  python main.py agent.json --evaluation             # Also print the evaluation tool
  python main.py --pillars                           # List assessment pillars
        """,
    )
    parser.add_argument("agent", nargs="?", help="Path to an agent JSON record")
    parser.add_argument("--candidate", help="Candidate name (preview placeholder if omitted)")
    parser.add_argument("--company-context", help="Path to a text file with company context")
    parser.add_argument(
        "--evaluation",
        action="store_true",
        help="Also print the evaluation tool JSON",
    )
    parser.add_argument(
        "--pillars",
        action="store_true",
        help="List available pillars and exit",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL env)")

    args = parser.parse_args()
    setup_logging(args.log_level)

    if args.pillars:
        print_pillars()
        return

    if not args.agent:
        parser.error("an agent JSON file is required")

    compile_agent(
        args.agent,
        candidate=args.candidate,
        company_context_path=args.company_context,
        show_evaluation=args.evaluation,
    )


if __name__ == "__main__":
    main()
