import json

import pytest

from webmux.encoders import Encoder, JSONEncoder, JSONProblemEncoder


def test_json_round_trip_and_content_type():
    data = {"name": "widget", "sizes": [1, 2, 3], "active": True}
    body, content_type = JSONEncoder(data).encode()
    assert content_type == "application/json"
    assert json.loads(body) == data


def test_json_is_compact():
    body, _ = JSONEncoder({"a": 1}).encode()
    assert b" " not in body


def test_problem_content_type():
    data = {"title": "bad"}
    body, content_type = JSONProblemEncoder(data).encode()
    assert content_type == "application/problem+json"
    assert json.loads(body) == data


def test_objects_with_to_dict_are_serialised():
    class Thing:
        def to_dict(self):
            return {"k": "v"}

    body, _ = JSONEncoder([Thing()]).encode()
    assert json.loads(body) == [{"k": "v"}]


def test_unserialisable_raises():
    with pytest.raises(TypeError):
        JSONEncoder({"x": object()}).encode()


def test_encoder_is_abstract():
    with pytest.raises(TypeError):
        Encoder()