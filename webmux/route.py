"""Registered routes and their documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any, Callable, Optional


class ParamLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"


class DataType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


@dataclass
class ParamDoc:
    name: str
    location: ParamLocation
    data_type: DataType
    required: bool
    description: str


@dataclass
class BodyDoc:
    schema: Any
    description: str
    required: bool


@dataclass
class ResponseDoc:
    status: int
    schema: Any
    description: str


@dataclass
class Route:
    """A method and path bound to a handler, with fluent documentation setters."""

    method: str
    path: str
    handler: Optional[Callable[..., Any]] = None
    middlewares: tuple = ()
    summary: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    params: list[ParamDoc] = field(default_factory=list)
    body: Optional[BodyDoc] = None
    responses: dict[int, ResponseDoc] = field(default_factory=dict)

    def with_summary(self, value: str) -> "Route":
        self.summary = value
        return self

    def with_description(self, value: str) -> "Route":
        self.description = value
        return self

    def tag(self, *args: str) -> "Route":
        self.tags.extend(args)
        return self

    def with_body(self, schema: Any, description: str, required: bool) -> "Route":
        self.body = BodyDoc(schema, description, required)
        return self

    def param(self, name, location, data_type, required, description) -> "Route":
        self.params.append(
            ParamDoc(name, ParamLocation(location), DataType(data_type), required, description)
        )
        return self

    def path_param(self, name, data_type, description) -> "Route":
        return self.param(name, ParamLocation.PATH, data_type, True, description)

    def query_param(self, name, data_type, required, description) -> "Route":
        return self.param(name, ParamLocation.QUERY, data_type, required, description)

    def header_param(self, name, data_type, required, description) -> "Route":
        return self.param(name, ParamLocation.HEADER, data_type, required, description)

    def response(self, status: int, schema: Any, description: str) -> "Route":
        self.responses[int(status)] = ResponseDoc(int(status), schema, description)
        return self

    def ok(self, schema: Any) -> "Route":
        return self.response(HTTPStatus.OK, schema, "OK")

    def created(self, schema: Any) -> "Route":
        return self.response(HTTPStatus.CREATED, schema, "Created")

    def bad_request(self, schema: Any) -> "Route":
        return self.response(HTTPStatus.BAD_REQUEST, schema, "Bad Request")

    def not_found(self, schema: Any) -> "Route":
        return self.response(HTTPStatus.NOT_FOUND, schema, "Not Found")

    def internal_error(self, schema: Any) -> "Route":
        return self.response(HTTPStatus.INTERNAL_SERVER_ERROR, schema, "Internal Server Error")