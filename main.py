import argparse
import logging
import sys

# loading
from loading.errors import LoadError
from loading.fact_loader import load_facts
from loading.rule_loader import load_rules

# checks
from validation.checks import run_checks

# utils
from utils.format_model import print_model, print_working_memory

logger = logging.getLogger("main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Loads a certainty factor rules file and facts file and reports any format error.",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "rules_file",
        type=str,
        help="Rules file: a count line followed by lines like\n"
             "  R1: Si h2 o h3 Entonces h1, FC = 0.5",
    )

    parser.add_argument(
        "facts_file",
        type=str,
        help="Facts file: a count line, lines like 'h2, FC = 0.3',\n"
             "then 'Objetivo' and the goal fact",
    )

    parser.add_argument(
        "--print",
        dest="print_model",
        action="store_true",
        default=False,
        help="Print the loaded rules and facts to stdout in the input format",
    )

    parser.add_argument(
        "--print-working-memory",
        action="store_true",
        default=False,
        help="Print the working memory seeded from the facts file\n"
             "to stdout, one 'name: certainty' line per fact",
    )

    parser.add_argument(
        "--check-unique-ids",
        action="store_true",
        default=False,
        help="Warn about rule ids used more than once",
    )

    parser.add_argument(
        "--check-certainty-range",
        action="store_true",
        default=False,
        help="Warn about certainty factors outside [-1, 1]",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level of the diagnostics written to stderr",
    )

    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        knowledge_base = load_rules(args.rules_file)
        fact_base = load_facts(args.facts_file)
    except LoadError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except OSError as err:
        print(f"Error: cannot read {err.filename}: {err.strerror}", file=sys.stderr)
        return 1

    run_checks(
        knowledge_base,
        fact_base,
        unique_ids=args.check_unique_ids,
        certainty_range=args.check_certainty_range,
    )

    if args.print_model:
        print_model(knowledge_base=knowledge_base, fact_base=fact_base)

    if args.print_working_memory:
        print_working_memory(fact_base=fact_base)

    logger.info("Knowledge base: %d rules, fact base: %d facts, goal '%s'",
                len(knowledge_base), len(fact_base.initial_facts), fact_base.goal.name)
    return 0


if __name__ == "__main__":
    sys.exit(run())
