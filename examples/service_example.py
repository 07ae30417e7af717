"""Example service wiring the default pipeline and the stdlib bridge.

Run with:
    python examples/service_example.py

Library code using ``logging.getLogger`` and application code using
logpipe both end up on stderr in the same terminal layout.
"""

import logging

import logpipe
from logpipe.bootstrap import must_logger


class OrderNotFound(logpipe.RequestError):
    pass


def main() -> None:
    log = must_logger("dev", "shop", "0.1.0", level="dbug", color=True)

    # Route stdlib logging through the same pipeline
    logging.getLogger().addHandler(logpipe.PipelineLogHandler(log.get_handler()))
    logging.getLogger().setLevel(logging.DEBUG)

    orders = log.new("component", "orders")
    orders.info("order placed", "order_id", 1042, "total", 99.5)
    orders.warn("slow payment gateway", "latency_ms", 1840)
    orders.error("lookup failed", OrderNotFound("order 7 does not exist"))
    orders.debug(
        "cart contents",
        logpipe.spew({"sku": "A-1", "qty": 2}, "cart"),
        logpipe.alone("customer", "ann@example.com"),
    )

    logging.getLogger("payments.client").warning("retrying charge %d", 3)


if __name__ == "__main__":
    main()
