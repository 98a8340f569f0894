from webmux.middleware import apply_middleware


def _tagging(tag, calls):
    def middleware(handler):
        def wrapped(value):
            calls.append(tag)
            return handler(value)

        return wrapped

    return middleware


def test_first_middleware_runs_outermost():
    calls = []
    handler = apply_middleware(
        [_tagging("a", calls), _tagging("b", calls)],
        lambda value: calls.append("handler") or value,
    )
    assert handler(5) == 5
    assert calls == ["a", "b", "handler"]


def test_none_entries_are_skipped():
    calls = []
    handler = apply_middleware([None, _tagging("x", calls), None], lambda v: v * 2)
    assert handler(4) == 8
    assert calls == ["x"]


def test_empty_list_returns_handler_unchanged():
    def handler(value):
        return value

    assert apply_middleware([], handler) is handler