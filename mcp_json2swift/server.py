import json
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import Context, FastMCP

from mcp_json2swift.context import (DEFAULT_MODEL_NAME, AppContext,
                                    GenerationOptions, ModelType,
                                    get_artifact_dir)
from mcp_json2swift.emitter import generate_swift_code


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage application lifecycle with type-safe context"""
    yield AppContext(options=GenerationOptions())


mcp = FastMCP("JSON to Swift", lifespan=app_lifespan)


@mcp.tool("json2swift_get_model_type")
def json2swift_get_model_type(ctx: Context) -> str:
    """
    Returns the protocol generated structs conform to (Decodable or Codable).
    """
    app_ctx: AppContext = ctx.request_context.lifespan_context
    return app_ctx.options.model_type


@mcp.tool("json2swift_change_model_type")
def json2swift_change_model_type(
    model_type: ModelType,
    ctx: Context,
) -> str:
    """
    Change the protocol generated structs conform to.
    Use Decodable for decode-only models and Codable for decode-and-encode.
    This will change the model type for the current session.
    """

    app_ctx: AppContext = ctx.request_context.lifespan_context
    app_ctx.options = app_ctx.options.model_copy(
        update={"model_type": GenerationOptions(model_type=model_type).model_type}
    )
    return app_ctx.options.model_type


@mcp.tool("json2swift_generate_models")
def json2swift_generate_models(
    json_document: str,
    ctx: Context,
    model_name: str = DEFAULT_MODEL_NAME,
) -> str:
    """
    Generate Swift structs for a JSON document.
    The document must be a JSON object. Nested objects become their own structs
    named after the field holding them. Keys are converted to camelCase and a
    CodingKeys enum maps renamed fields back to their JSON keys.
    Returns the Swift source code.
    """
    app_ctx: AppContext = ctx.request_context.lifespan_context
    return generate_swift_code(
        json.loads(json_document),
        model_name=model_name,
        model_type=app_ctx.options.model_type,
        disambiguate=app_ctx.options.disambiguate,
    )


@mcp.tool("json2swift_save_models")
def json2swift_save_models(
    json_document: str,
    artifact_name: str,
    ctx: Context,
    model_name: str = DEFAULT_MODEL_NAME,
) -> str:
    """
    Generate Swift structs for a JSON document and save them to an artifact file
    with given name.
    The artifact is saved in the MCP_ARTIFACT_DIR environment variable.
    Returns the path to the artifact file.
    """
    swift_code = json2swift_generate_models(
        json_document=json_document,
        ctx=ctx,
        model_name=model_name,
    )

    artifact_path = get_artifact_dir() / artifact_name
    artifact_path.write_text(swift_code)
    return str(artifact_path)


def main():
    mcp.run()


if __name__ == "__main__":
    main()
