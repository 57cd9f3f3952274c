from pydantic import BaseModel, ConfigDict, Field, field_validator

from deepcli.core.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE


class RuntimeOptions(BaseModel):
    """Options collected from the command line, built once per invocation"""
    model_config = ConfigDict(frozen=True)

    instruction: str = Field("", description="Instruction text for the model")
    input_file: str = Field("", description="File whose content is sent as context")
    output_file: str = Field("", description="File the response is written to")
    temperature: float = Field(DEFAULT_TEMPERATURE, description="Sampling temperature (0.0-2.0)")
    max_tokens: int = Field(DEFAULT_MAX_TOKENS, description="Maximum number of tokens to generate")
    raw_output: bool = Field(False, description="Print the raw JSON response body")
    verbose: bool = Field(False, description="Log diagnostics to stderr")
    words: tuple[str, ...] = Field((), description="Positional arguments, used when no instruction is given")

    @field_validator("temperature")
    @classmethod
    def _validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 2.0:
            raise ValueError("temperature must be between 0.0 and 2.0")
        return value

    @field_validator("max_tokens")
    @classmethod
    def _validate_max_tokens(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max tokens must be greater than 0")
        return value
