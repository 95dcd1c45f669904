"""Request logging context — store log lines carry the request that caused them."""

import logging

from tracker.infrastructure.observability import RequestContextFilter


async def test_store_logs_carry_request_method_and_path(client, caplog):
    caplog.set_level(logging.INFO, logger="tracker")
    caplog.handler.addFilter(RequestContextFilter())

    await client.post("/api/users", data={"username": "bob"})

    [record] = [r for r in caplog.records if r.getMessage().startswith("Created user")]
    assert record.method == "POST"
    assert record.path == "/api/users"
