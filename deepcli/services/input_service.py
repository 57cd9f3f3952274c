import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, TextIO

from deepcli.core.errors import DeepCliError
from deepcli.models.options import RuntimeOptions

logger = logging.getLogger(__name__)


class InputReadError(DeepCliError):
    """Raised when stdin or the input file cannot be read"""
    pass


class MissingInstructionError(DeepCliError):
    """Raised when neither an instruction nor positional words were given"""
    pass


@dataclass(frozen=True)
class AssembledInput:
    input: str
    prompt: str


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def read_piped_input(stream: TextIO) -> str:
    """Read all of `stream`, unless it is an interactive terminal"""
    try:
        if stream.isatty():
            return ""
        logger.debug("Reading data from stdin...")
        buffer = getattr(stream, "buffer", None)
        data = _decode(buffer.read()) if buffer is not None else stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Error reading from stdin: {e}") from e

    logger.debug(f"Read {len(data.encode('utf-8'))} bytes from stdin")
    return data


def read_input_file(path: str) -> str:
    """Read the file as bytes so line endings reach the request unchanged"""
    logger.debug(f"Reading input file: {path}")
    try:
        return _decode(Path(path).read_bytes())
    except OSError as e:
        raise InputReadError(f"Error reading input file {path}: {e}") from e


def combine_inputs(piped: str, file_content: str | None) -> str:
    """
    Append file content after the piped text.
    Without a file, the piped text is returned untouched.
    """
    if file_content is None:
        return piped

    if piped:
        logger.debug("Combining stdin input with input file")
    return piped.strip() + "\n" + file_content


def resolve_prompt(instruction: str, words: Sequence[str]) -> str:
    if instruction:
        return instruction
    if words:
        return " ".join(words)
    raise MissingInstructionError("No instruction was provided")


def assemble_input(options: RuntimeOptions, stdin: TextIO) -> AssembledInput:
    input_text = read_piped_input(stdin)

    if options.input_file:
        input_text = combine_inputs(input_text, read_input_file(options.input_file))
        logger.debug(f"Total of {len(input_text.encode('utf-8'))} bytes of input")

    prompt = resolve_prompt(options.instruction, options.words)
    return AssembledInput(input=input_text, prompt=prompt)
