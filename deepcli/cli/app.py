import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence, TextIO

from pydantic import ValidationError

from deepcli.core.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, ENV_FILE, load_settings, require_api_key
from deepcli.core.errors import ConfigurationError, DeepCliError
from deepcli.core.logging import configure_logging
from deepcli.cli.help_text import format_help
from deepcli.models.options import RuntimeOptions
from deepcli.services.input_service import MissingInstructionError, assemble_input
from deepcli.services.llm.llm_service import DeepSeekLlmService
from deepcli.services.llm.llm_service_base import LlmService
from deepcli.services.llm.request_builder import build_completion_request
from deepcli.services.llm_logging_service import LlmLoggingService
from deepcli.services.output_service import ApiResponseError, handle_response

PROG = "deepcli"

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports errors instead of exiting with status 2"""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("-i", "-instruction", "--instruction", default="", help="Instruction for DeepSeek")
    parser.add_argument("-f", "-file", "--file", dest="input_file", default="", help="Input file with the code to analyze")
    parser.add_argument("-o", "-output", "--output", dest="output_file", default="", help="Output file for the response")
    parser.add_argument(
        "-t", "-temperature", "--temperature", type=float, default=DEFAULT_TEMPERATURE,
        help="Generation temperature (0.0-2.0)",
    )
    parser.add_argument(
        "-m", "-maxtokens", "--maxtokens", "--max-tokens", dest="max_tokens", type=int, default=DEFAULT_MAX_TOKENS,
        help="Maximum number of tokens to generate",
    )
    parser.add_argument("-raw", "--raw", dest="raw_output", action="store_true", help="Print the raw JSON response")
    parser.add_argument("-v", "-verbose", "--verbose", action="store_true", help="Show detailed execution messages")
    parser.add_argument("-h", "-help", "--help", dest="show_help", action="store_true", help="Show help")
    parser.add_argument("words", nargs="*", help="Instruction words, used when -i is not given")
    return parser


def build_options(args: argparse.Namespace) -> RuntimeOptions:
    try:
        return RuntimeOptions(
            instruction=args.instruction,
            input_file=args.input_file,
            output_file=args.output_file,
            temperature=args.temperature,
            max_tokens=args.max_tokens,
            raw_output=args.raw_output,
            verbose=args.verbose,
            words=tuple(args.words),
        )
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        cause = detail.get("ctx", {}).get("error")
        messages.append(str(cause) if cause is not None else detail["msg"])
    return "; ".join(messages)


def run(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    llm_service: LlmService | None = None,
    env_file: str | Path | None = ENV_FILE,
) -> int:
    """
    Run one deepcli invocation and return the process exit status.
    Streams and the LLM service can be injected; they default to the process ones.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except ConfigurationError as e:
        stderr.write(f"Error: {e}\n")
        stderr.write(format_help(PROG))
        return 1

    if args.show_help:
        stdout.write(format_help(PROG))
        return 0

    configure_logging(args.verbose, stderr)

    try:
        options = build_options(args)

        settings = load_settings(env_file)
        api_key = require_api_key(settings)

        assembled = assemble_input(options, stdin)

        logger.debug(f"Preparing request with prompt: {assembled.prompt}")
        logger.debug(f"Configuration - Temperature: {options.temperature:.2f}, MaxTokens: {options.max_tokens}")

        request = build_completion_request(
            input_text=assembled.input,
            prompt=assembled.prompt,
            temperature=options.temperature,
            max_tokens=options.max_tokens,
        )
        logger.debug(f"Prepared request with {len(request.messages)} messages")

        if llm_service is None:
            llm_service = DeepSeekLlmService(timeout=settings.request_timeout())
        llm_logger = LlmLoggingService(stderr).create(options.verbose)

        raw = llm_service.send_completion(api_key, request, llm_logger)
        return handle_response(raw, options, stdout)
    except MissingInstructionError as e:
        logger.debug(f"Error: {e}")
        stderr.write(f"Error: {e}\n")
        stderr.write(format_help(PROG))
        return 1
    except ApiResponseError as e:
        stderr.write(f"API error: {e}\n")
        return 1
    except DeepCliError as e:
        stderr.write(f"Error: {e}\n")
        return 1


def main() -> None:
    sys.exit(run())
