"""
Command-line interface for relay translation
"""
import sys
import argparse

from relay_translator.config import (
    GOOGLE_TRANSLATE_API_KEY,
    LANGUAGES_FILE,
    LOG_LEVEL,
    LOG_LEVEL_NAMES,
    MAX_CHAIN_ROUNDS,
    MIN_CHAIN_ROUNDS,
    RelaySettings,
)
from relay_translator.core.context import build_relay_context
from relay_translator.utils.unified_logger import create_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Relay a text through a random intermediate language into Japanese.")
    parser.add_argument("text", help="Text to relay.")
    parser.add_argument("-r", "--rounds", type=int, default=1,
                        help=f"Number of relays, each fed the previous result ({MIN_CHAIN_ROUNDS}-{MAX_CHAIN_ROUNDS}, default: 1).")
    parser.add_argument("--mock", action="store_true", help="Use the offline mock translation service.")
    parser.add_argument("--api_key", default=GOOGLE_TRANSLATE_API_KEY, help="Google Cloud Translation API key.")
    parser.add_argument("--languages", default=LANGUAGES_FILE, help=f"Language catalog file (default: {LANGUAGES_FILE}).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the language draw.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVEL_NAMES, default=LOG_LEVEL,
                        help=f"Minimum log level (default: {LOG_LEVEL}).")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.text.strip():
        parser.error("text must not be empty")
    if not MIN_CHAIN_ROUNDS <= args.rounds <= MAX_CHAIN_ROUNDS:
        parser.error(f"--rounds must be between {MIN_CHAIN_ROUNDS} and {MAX_CHAIN_ROUNDS}")

    base = RelaySettings.from_env()
    settings = RelaySettings(
        provider_mode='mock' if args.mock else base.provider_mode,
        languages_file=args.languages,
        api_key=args.api_key,
        log_level=args.log_level,
        random_seed=args.seed,
    )
    logger = create_logger(settings.log_level, enable_colors=not args.no_color)
    context = build_relay_context(settings, logger=logger)

    try:
        if args.rounds == 1:
            outcome = context.orchestrator.execute(args.text)
            rounds = (outcome.unwrap(),) if outcome.is_ok() else ()
        else:
            outcome = context.orchestrator.execute_chain(args.text, args.rounds)
            rounds = outcome.unwrap().rounds if outcome.is_ok() else ()
    finally:
        context.close()

    if outcome.is_err():
        error = outcome.unwrap_err()
        print(f"Translation failed at the {error.stage.value} stage: {error.cause}", file=sys.stderr)
        return 1

    for number, relay in enumerate(rounds, start=1):
        print(f"[{number}] {relay.original_text} -> ({relay.intermediate_language}) "
              f"{relay.intermediate_text} -> {relay.final_text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
