from http import HTTPStatus

import pytest

from webmux.route import BodyDoc, DataType, ParamDoc, ParamLocation, Route, ResponseDoc


def test_fluent_setters_return_same_route():
    route = Route("GET", "/items")
    same = route.with_summary("s").with_description("d").tag("a", "b").tag("c")
    assert same is route
    assert (route.summary, route.description, route.tags) == ("s", "d", ["a", "b", "c"])


def test_path_param_is_required():
    route = Route("GET", "/items/{id}").path_param("id", DataType.INTEGER, "ident")
    assert route.params == [ParamDoc("id", ParamLocation.PATH, DataType.INTEGER, True, "ident")]


def test_query_and_header_params_keep_order():
    route = (
        Route("GET", "/")
        .query_param("q", "string", False, "query")
        .header_param("X-Req", DataType.STRING, True, "hdr")
    )
    assert [p.location for p in route.params] == [ParamLocation.QUERY, ParamLocation.HEADER]
    assert route.params[0].required is False
    assert route.params[0].data_type is DataType.STRING


def test_invalid_location_raises():
    with pytest.raises(ValueError):
        Route("GET", "/").param("x", "cookie", DataType.STRING, False, "")


def test_body():
    route = Route("POST", "/").with_body(dict, "payload", True)
    assert route.body == BodyDoc(dict, "payload", True)


def test_response_shortcuts():
    route = Route("GET", "/").ok(str).created(int).bad_request(None).not_found(None).internal_error(None)
    assert route.responses[HTTPStatus.OK] == ResponseDoc(HTTPStatus.OK, str, "OK")
    assert route.responses[HTTPStatus.CREATED].description == "Created"
    assert route.responses[HTTPStatus.BAD_REQUEST].description == "Bad Request"
    assert route.responses[HTTPStatus.NOT_FOUND].description == "Not Found"
    assert route.responses[HTTPStatus.INTERNAL_SERVER_ERROR].description == "Internal Server Error"


def test_response_overwrites_same_status():
    route = Route("GET", "/").response(HTTPStatus.OK, str, "first").response(HTTPStatus.OK, int, "second")
    assert len(route.responses) == 1
    assert route.responses[HTTPStatus.OK].description == "second"