"""Context classes for generation options and application configuration.

This module provides data classes for the options of a generation run and the
MCP server application context.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

ModelType = Literal["Decodable", "Codable"]

DEFAULT_MODEL_NAME = "RootModel"


class GenerationOptions(BaseModel):
    """Represents the options of a generation run.

    :ivar model_name: The name of the root struct.
    :type model_name: str
    :ivar model_type: The protocol every generated struct conforms to.
    :type model_type: ModelType
    :ivar disambiguate: Whether differing shapes sharing a name are renamed.
    :type disambiguate: bool
    """

    model_name: str = Field(
        default=DEFAULT_MODEL_NAME,
        min_length=1,
        description="The name of the root struct.",
    )
    model_type: ModelType = Field(
        default="Decodable",
        description="The protocol every generated struct conforms to.",
    )
    disambiguate: bool = Field(
        default=True,
        description="Whether differing shapes sharing a name are renamed.",
    )


class AppContext(BaseModel):
    """Represents the application context configuration.

    :ivar options: The generation options of the current session.
    :type options: GenerationOptions
    """

    options: GenerationOptions = Field(
        default_factory=GenerationOptions,
        description="The generation options of the current session.",
    )


def get_artifact_dir() -> Path:
    """Return the directory generated artifacts are written to.

    :return: The value of the MCP_ARTIFACT_DIR environment variable.
    :rtype: Path
    :raises ValueError: If MCP_ARTIFACT_DIR is not set or empty
    """
    artifact_dir = os.environ.get("MCP_ARTIFACT_DIR", "").strip()
    if not artifact_dir:
        raise ValueError("MCP_ARTIFACT_DIR environment variable is not set")
    return Path(artifact_dir)
