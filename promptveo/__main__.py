"""
PromptVEO Main Entry Point

Run the desktop UI, a headless generate, or the scene backend.
"""

import argparse
import sys
from pathlib import Path

from promptveo.core.config import load_config
from promptveo.core.exceptions import PromptVeoError
from promptveo.core.logging_config import LogLevel, get_logger, setup_logging
from promptveo.core.session import SceneSession
from promptveo.services.scene_client import SceneApiClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptveo",
        description="PromptVEO - turn transcripts into JSON video scene lists"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file"
    )

    parser.add_argument(
        "--backend-url",
        type=str,
        help="Scene backend URL (overrides config and PROMPTVEO_BACKEND_URL)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the scene backend instead of the client"
    )

    parser.add_argument(
        "--cli",
        nargs=2,
        metavar=("COMMAND", "TRANSCRIPT_FILE"),
        help="Run headless; COMMAND is 'generate'"
    )

    parser.add_argument(
        "--character",
        type=str,
        default="",
        help="Main character description (headless mode)"
    )

    parser.add_argument(
        "--expand",
        type=int,
        default=0,
        help="Scenes to add after generating (headless mode)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Where to write the scene list (headless mode, default: config export_filename)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for PromptVEO."""
    args = build_parser().parse_args(argv)

    setup_logging(level=LogLevel.DEBUG if args.debug else LogLevel.INFO, verbose=args.debug)
    logger = get_logger("main")

    if args.serve:
        from backend.main import run
        run()
        return 0

    try:
        config = load_config(Path(args.config) if args.config else None)
    except PromptVeoError as e:
        logger.error(f"Could not load config: {e}")
        return 2

    if args.backend_url:
        config.backend_url = args.backend_url

    client = SceneApiClient(config.backend_url, timeout=config.request_timeout)
    session = SceneSession(client, default_expand_count=config.default_expand_count)

    try:
        if args.cli:
            return run_cli(args, config, session)

        logger.info(f"Starting {config.app_name} (backend: {config.backend_url})")
        from promptveo.ui import run_app
        run_app(session, config)
        return 0
    finally:
        client.close()


def run_cli(args, config, session: SceneSession) -> int:
    """Generate (and optionally expand) scenes without the UI."""
    command, transcript_file = args.cli
    if command != "generate":
        print(f"Unknown command: {command}", file=sys.stderr)
        return 2

    try:
        transcript = session.open_transcript(transcript_file)
        session.generate(transcript, args.character)
        if args.expand > 0:
            session.expand(args.expand)
        output = Path(args.output or config.export_filename)
        session.export_json(output)
    except PromptVeoError:
        print(session.status_text, file=sys.stderr)
        return 1

    print(session.status_text)
    print(session.describe())
    print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
