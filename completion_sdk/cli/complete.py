import argparse
import asyncio
import sys
from typing import List, Optional

from completion_sdk.api.completion import Completion
from completion_sdk.core.config import APISettings
from completion_sdk.core.errors import CompletionSDKError
from completion_sdk.core.logging import setup_logging
from completion_sdk.schemas.completion import CompletionRequest
from completion_sdk.schemas.models import Model, DEFAULT_MODEL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Request a text completion (credentials from OPENAPI_SECRET_KEY)"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        required=True,
        help="Input prompt text",
    )
    parser.add_argument(
        "--model",
        type=Model,
        choices=list(Model),
        metavar="MODEL",
        default=DEFAULT_MODEL,
        help=f"Model identifier (default: {DEFAULT_MODEL.value})",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=None,
        help="Maximum tokens to generate",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Sampling temperature",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="API base URL (default: settings host)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    return parser


def build_request(args: argparse.Namespace) -> CompletionRequest:
    changes = {"engine": args.model, "prompt": args.prompt}
    if args.max_tokens is not None:
        changes["max_tokens"] = args.max_tokens
    if args.temperature is not None:
        changes["temperature"] = args.temperature
    return CompletionRequest().with_changes(**changes)


async def run(settings: APISettings, request: CompletionRequest) -> List[str]:
    async with Completion(settings, request) as completion:
        response = await completion.execute(request.prompt)
    return [choice.text for choice in response.choices]


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = APISettings.from_env()
        if args.host:
            settings = settings.with_host(args.host)
        if args.timeout is not None:
            settings = settings.with_request_timeout(args.timeout)

        texts = asyncio.run(run(settings, build_request(args)))
        for text in texts:
            print(text)
    except CompletionSDKError as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
