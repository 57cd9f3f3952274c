import logging
import os
from typing import TextIO

from pydantic import ValidationError

from deepcli.core.errors import DeepCliError
from deepcli.models.completion.responses import (
    CompletionApiError,
    CompletionEmpty,
    CompletionResponseBody,
    CompletionResult,
)
from deepcli.models.options import RuntimeOptions
from deepcli.services.llm.llm_service_base import RawCompletion

logger = logging.getLogger(__name__)

OUTPUT_FILE_MODE = 0o644


class ResponseParseError(DeepCliError):
    """Raised when the response body is not a valid completion payload"""
    pass


class ApiResponseError(DeepCliError):
    """Raised when the API reports its own error message"""
    pass


class EmptyResponseError(DeepCliError):
    """Raised when the API returns neither an error nor any choices"""
    pass


class OutputWriteError(DeepCliError):
    """Raised when the response cannot be written to the output file"""
    pass


def parse_completion_response(body: bytes, status_code: int | None = None) -> CompletionResult:
    try:
        parsed = CompletionResponseBody.model_validate_json(body)
    except ValidationError as e:
        status_note = f" (HTTP {status_code})" if status_code is not None and not 200 <= status_code < 300 else ""
        raise ResponseParseError(f"Error parsing JSON response{status_note}: {e}") from e

    return parsed.to_result()


def write_output_file(path: str, text: str) -> None:
    """Write `text` to `path`, truncating an existing file"""
    logger.debug(f"Writing response to file: {path}")
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"Error writing output file {path}: {e}") from e


def write_raw_body(stream: TextIO, body: bytes) -> None:
    """Emit the body bytes unchanged, followed by a newline"""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(body.decode("utf-8", errors="replace") + "\n")
        stream.flush()
        return

    stream.flush()
    buffer.write(body + b"\n")
    buffer.flush()


def handle_response(raw: RawCompletion, options: RuntimeOptions, stdout: TextIO) -> int:
    """
    Route the completion to stdout or the output file and return the exit status.
    Every failure is raised as a DeepCliError.
    """
    if options.raw_output:
        write_raw_body(stdout, raw.body)
        return 0

    result = parse_completion_response(raw.body, raw.status_code)

    if isinstance(result, CompletionApiError):
        raise ApiResponseError(result.message)

    if isinstance(result, CompletionEmpty):
        raise EmptyResponseError("No valid response was received from the API")

    output = result.content
    if options.output_file:
        write_output_file(options.output_file, output)
        stdout.write(f"Response written to {options.output_file}\n")
    else:
        stdout.write(output + "\n")
    stdout.flush()
    return 0
