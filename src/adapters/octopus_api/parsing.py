"""Deserialización validada de respuestas.

Cualquier cuerpo que no sea JSON o que no encaje con el registro esperado se
reporta como `MalformedResponseError`, nunca como un `KeyError` suelto.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import LinkedResource, ResourceCollection
from core.errors import MalformedResponseError, OctopusApiError
from core.interfaces.web_client import WebResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def ensure_success(response: WebResponse) -> WebResponse:
    if response.is_error_code:
        raise OctopusApiError(response.status_code, response.content)
    return response


def parse_model(model: type[ModelT], data: object) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Unexpected {model.__name__} payload ({exc.error_count()} error(s)):\n{exc}"
        ) from exc


def parse_json(response: WebResponse) -> object:
    try:
        return json.loads(response.content)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Response body is not valid JSON: {exc}") from exc


def parse_items(response: WebResponse) -> list[dict[str, Any]]:
    """Devuelve el array `Items` de una colección, item a item sin tipar."""

    collection = parse_model(ResourceCollection[dict[str, Any]], parse_json(response))
    return collection.items


def parse_array(response: WebResponse, model: type[ModelT]) -> list[ModelT]:
    data = parse_json(response)
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected a JSON array of {model.__name__}")
    return [parse_model(model, item) for item in data]


def portal_url(data: object) -> str:
    """Extrae `Links.Web` de un recurso."""

    return parse_model(LinkedResource, data).links.web
