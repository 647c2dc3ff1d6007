import pytest

NOT_FOUND = {"error": "Not Found"}


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/unknown"),
        ("GET", "/"),
        ("GET", "/docs"),
        ("GET", "/api/employees/"),
        ("GET", "/api/employees/5"),
        ("PATCH", "/api/employees/5"),
        ("POST", "/api/departments"),
        ("DELETE", "/api/employees"),
    ],
)
def test_unmatched_routes_are_404(client, pool, method, path):
    resp = client.request(method, path)

    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND
    pool.fetch.assert_not_awaited()
    pool.fetchrow.assert_not_awaited()
    pool.execute.assert_not_awaited()


def test_missing_pool_is_a_server_error():
    from types import SimpleNamespace

    from core import db

    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    with pytest.raises(RuntimeError):
        db.get_pool(request)


def test_validation_error_without_route_message_keeps_error_shape():
    import asyncio

    from fastapi.exceptions import RequestValidationError
    from starlette.requests import Request

    from core import errors

    request = Request({"type": "http", "method": "GET", "path": "/x", "headers": [], "query_string": b""})
    exc = RequestValidationError([{"type": "missing", "loc": ("query", "q"), "msg": "Field required"}])

    resp = asyncio.run(errors.validation_exception_handler(request, exc))

    assert resp.status_code == 422
    assert resp.body == b'{"error":"Unprocessable Entity"}'
