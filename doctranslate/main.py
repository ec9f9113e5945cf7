"""Entry point: translate text from the command line."""

import argparse
import dataclasses
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doctranslate",
        description="Translate text or HTML documentation with a bounded wait.",
    )
    parser.add_argument("text", help="Text to translate")
    parser.add_argument(
        "-s", "--source", default=None,
        help="Source language code (default: detect)",
    )
    parser.add_argument(
        "-t", "--target", default=None,
        help="Target language code (default: PRIMARY_LANGUAGE)",
    )
    parser.add_argument(
        "-d", "--documentation", action="store_true",
        help="Translate as HTML documentation",
    )
    parser.add_argument(
        "--provider", default=None,
        help="Translation provider (default: TRANSLATION_PROVIDER)",
    )
    parser.add_argument(
        "--timeout-ms", type=int, default=None,
        help="Maximum time to wait for the translation",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command-line translator."""
    # Import config first so .env values are loaded before anything reads them
    from doctranslate import config
    from doctranslate.languages import Lang
    from doctranslate.providers import load_provider
    from doctranslate.task import AsyncTranslationTask
    from doctranslate.worker import BackgroundWorker

    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    try:
        settings = config.load_settings()
        if args.target:
            settings = dataclasses.replace(settings, primary_language=Lang.value_of_code(args.target))
        source = Lang.value_of_code(args.source) if args.source else None
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    provider_name = args.provider or settings.provider
    logger.info(
        "Translating: provider=%s source=%s target=%s",
        provider_name,
        source.code if source else Lang.AUTO.code,
        settings.primary_language.code,
    )

    provider = load_provider(provider_name, settings=settings)
    worker = BackgroundWorker()
    try:
        task = AsyncTranslationTask(
            args.text,
            provider,
            source,
            documentation=args.documentation,
            worker=worker,
            timeout_ms=(
                args.timeout_ms if args.timeout_ms is not None else settings.translation_timeout_ms
            ),
            poll_interval_ms=settings.poll_interval_ms,
        )
        translated = task.non_blocking_get()
        if translated is None:
            # Fall back to the untranslated text
            print(args.text)
            return 1
        print(translated)
        return 0
    finally:
        # Abandoned fetches are cancelled before the client they use is closed
        worker.shutdown(cleanup=provider.close)


if __name__ == "__main__":
    sys.exit(main())
