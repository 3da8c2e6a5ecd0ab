"""Command-line client: python -m ocr_translate_service.client IMAGE [--url URL]"""

import argparse
import asyncio
import sys
from pathlib import Path

from ocr_translate_service.client.render import render_steps, render_state
from ocr_translate_service.client.session import ClientSession
from ocr_translate_service.client.state import ClientPhase, ProcessingState


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ocr_translate_service.client",
                                     description="Upload an image and show the extracted, translated text.")
    parser.add_argument("image", type=Path, help="image file to analyze (JPG, PNG, GIF, WEBP)")
    parser.add_argument("--url", default="http://localhost:8090", help="service base url")
    parser.add_argument("--mime-type", default=None, help="override the detected content type")
    parser.add_argument("--no-animation", action="store_true", help="skip the progress pauses")
    return parser.parse_args(argv)


def print_progress(state: ProcessingState) -> None:
    if state.phase.is_processing:
        print("\n".join(render_steps(state)), end="\n\n", flush=True)


async def run(args: argparse.Namespace) -> int:
    pauses = {"step_pause": 0.0, "quick_stop_pause": 0.0} if args.no_animation else {}

    async with ClientSession(base_url=args.url, **pauses) as session:
        if not session.select_file(args.image.name, args.image.read_bytes(), args.mime_type):
            print(render_state(session.state), file=sys.stderr)
            return 2

        session.subscribe(print_progress)
        state = await session.submit()

    print(render_state(state), file=sys.stderr if state.phase is ClientPhase.FAILED else sys.stdout)
    return 1 if state.phase is ClientPhase.FAILED else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if not args.image.is_file():
        print(f"Error: {args.image} is not a file", file=sys.stderr)
        return 2
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
