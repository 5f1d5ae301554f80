# work_api/core/docs.py
"""
OpenAPI document and interactive API reference.

Endpoints answer with the bare ``item`` / ``items`` value, so the documented
success schema is the inner field's schema rather than the output model's.
Schemas are inlined, the document carries no ``$ref`` to shared components
for response bodies.
"""

import collections.abc
import copy
import json
import types
from typing import Any, Dict, List, Union, get_args, get_origin

from fastapi import APIRouter, FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, TypeAdapter

from work_api.config import Settings

INVALID_OUTPUT_SCHEMA_MESSAGE = (
    "Either 'item' or 'items' must be defined in the output schema. "
    "Please recheck the endpoint code"
)

SCALAR_JS_URL = "https://cdn.jsdelivr.net/npm/@scalar/api-reference"

_SEQUENCE_ORIGINS = (list, tuple, collections.abc.Sequence)

# `X | None` has its own origin type on 3.10+
_UNION_ORIGINS = (Union, types.UnionType) if hasattr(types, "UnionType") else (Union,)

# FastAPI documents a 422 for every route with a body, the service never sends one
_VALIDATION_STATUS = "422"
_VALIDATION_SCHEMAS = ("HTTPValidationError", "ValidationError")


def _inline_refs(node: Any, defs: Dict[str, Any]) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            target = copy.deepcopy(defs[ref.split("/")[-1]])
            siblings = {k: v for k, v in node.items() if k != "$ref"}
            target.update(siblings)
            return _inline_refs(target, defs)
        return {k: _inline_refs(v, defs) for k, v in node.items() if k != "$defs"}
    if isinstance(node, list):
        return [_inline_refs(v, defs) for v in node]
    return node


def inline_schema(annotation: Any) -> Dict[str, Any]:
    """JSON schema of *annotation* with every local ``$defs`` reference inlined."""
    schema = TypeAdapter(annotation).json_schema()
    return _inline_refs(schema, schema.get("$defs", {}))


def _is_sequence(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin in _UNION_ORIGINS:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return len(args) == 1 and _is_sequence(args[0])
    if origin is not None:
        return origin in _SEQUENCE_ORIGINS
    return annotation in (list, tuple)


def declared_examples(model: type) -> List[Any]:
    extra = model.model_config.get("json_schema_extra")
    if not isinstance(extra, dict):
        return []
    return list(extra.get("examples") or [])


def _with_examples(schema: Dict[str, Any], examples: List[Any]) -> Dict[str, Any]:
    if examples:
        schema["examples"] = examples
    return schema


def negotiate_positive_response(output_type: Any) -> Dict[str, Any]:
    """
    Pick the schema documented for a successful response.

    A model with an ``item`` field documents that field, a model with an
    ``items`` sequence documents the sequence. Declared examples follow the
    same rule and are kept only when they match the chosen shape. Types
    without a structured shape pass through; a model with neither field
    documents a placeholder carrying an advisory message.
    """
    if not (isinstance(output_type, type) and issubclass(output_type, BaseModel)):
        return inline_schema(output_type)

    fields = output_type.model_fields
    examples = [ex for ex in declared_examples(output_type) if isinstance(ex, dict)]

    if "item" in fields:
        schema = inline_schema(fields["item"].annotation)
        return _with_examples(schema, [ex["item"] for ex in examples if "item" in ex])

    if "items" in fields and _is_sequence(fields["items"].annotation):
        schema = inline_schema(fields["items"].annotation)
        return _with_examples(
            schema, [ex["items"] for ex in examples if isinstance(ex.get("items"), list)]
        )

    return {
        "type": "object",
        "properties": {
            "message": {"const": INVALID_OUTPUT_SCHEMA_MESSAGE, "type": "string"},
        },
        "required": ["message"],
    }


def positive_response(output_type: Any, description: str = "Successful Response") -> Dict[int, Any]:
    """``responses`` entry for a route whose body is the unwrapped output."""
    return {
        200: {
            "description": description,
            "content": {"application/json": {"schema": negotiate_positive_response(output_type)}},
        }
    }


def negative_response(status_code: int, model: type, description: str) -> Dict[int, Any]:
    return {
        status_code: {
            "description": description,
            "content": {"application/json": {"schema": inline_schema(model)}},
        }
    }


def _drop_validation_responses(document: Dict[str, Any]) -> Dict[str, Any]:
    for path_item in document.get("paths", {}).values():
        for operation in path_item.values():
            if isinstance(operation, dict):
                operation.get("responses", {}).pop(_VALIDATION_STATUS, None)

    schemas = document.get("components", {}).get("schemas", {})
    for name in _VALIDATION_SCHEMAS:
        schemas.pop(name, None)
    if "components" in document and not schemas:
        document["components"].pop("schemas", None)
        if not document["components"]:
            del document["components"]
    return document


def build_openapi(app: FastAPI, settings: Settings) -> Dict[str, Any]:
    """Generate the document once and pin it on the app."""
    if app.openapi_schema is None:
        document = get_openapi(
            title=settings.title,
            version=settings.version,
            routes=app.routes,
            servers=[{"url": settings.server_url}],
        )
        app.openapi_schema = _drop_validation_responses(document)
    return app.openapi_schema


def get_reference_html(openapi_url: str, title: str) -> HTMLResponse:
    html = f"""<!doctype html>
<html>
  <head>
    <title>{title}</title>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
  </head>
  <body>
    <script id="api-reference" data-url={json.dumps(openapi_url)}></script>
    <script src="{SCALAR_JS_URL}"></script>
  </body>
</html>
"""
    return HTMLResponse(html)


def docs_router(app: FastAPI, settings: Settings) -> APIRouter:
    spec = build_openapi(app, settings)
    openapi_url = f"{settings.docs_path}/openapi.json"
    router = APIRouter(prefix=settings.docs_path, include_in_schema=False)

    @router.get("")
    def api_reference() -> HTMLResponse:
        return get_reference_html(openapi_url, settings.title)

    @router.get("/openapi.json")
    def openapi_document() -> JSONResponse:
        return JSONResponse(spec)

    return router
