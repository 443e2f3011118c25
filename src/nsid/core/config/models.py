"""
Configuration data models for nsid.

These models define the structure of .nsid.json and
~/.config/nsid/config.json files, with validation via Pydantic.
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

IdTypeName = Literal["str", "int", "float", "decimal", "uuid"]
OutputFormat = Literal["text", "json"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

ID_TYPE_NAMES: tuple[str, ...] = get_args(IdTypeName)
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class NsidConfig(BaseModel):
    """
    Top-level nsid configuration.

    Controls how the command line decodes and prints identifiers. The id
    string format itself is fixed and not configurable.
    """

    default_id_type: IdTypeName = Field(
        default="str",
        description="Id value type used when a command does not pass --type",
    )
    output_format: OutputFormat = Field(
        default="text",
        description="Output format for decoded identifiers: 'text' or 'json'",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Logging level when --debug is not given",
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        frozen=True,
    )
