"""Background order placement."""

import asyncio

import pytest
from kungfu import Ok, Error
from structlog.testing import capture_logs

from storefront import notify as N
from storefront import pricing as P
from storefront.config import Settings
from storefront.order import Order, COMPLETED
from storefront.placement import OrderPlacement, run_checkout


def laptop_order(catalog, emit) -> Order:
    order = Order()
    order.add_item(catalog.require(1).priced(P.percentage(10)))
    order.add_observer(N.EmailNotifier(emit))
    order.add_observer(N.SmsNotifier(emit))
    return order


class Exploding:
    def update(self, status: str) -> None:
        raise RuntimeError("sms gateway down")


@pytest.mark.asyncio
async def test_card_checkout_end_to_end(catalog, settings, lines, emit):
    placement = OrderPlacement(settings, emit=emit)
    order = laptop_order(catalog, emit)

    placement.place(order, "card")

    # place() returns before anything ran
    assert order.status is None
    assert lines == []
    assert placement.pending == 1

    outcomes = await placement.drain()

    assert lines == [
        "Processing order...",
        "Credit Card Payment Successful: ₹67500.00",
        "Email Notification: Order COMPLETED",
        "SMS Notification: Order COMPLETED",
        "Order placed successfully!",
    ]
    assert order.status == COMPLETED
    assert placement.pending == 0
    assert len(outcomes) == 1
    outcome = outcomes[0]
    assert outcome.succeeded
    assert outcome.order_id == order.id
    receipt = outcome.result.unwrap().value
    assert receipt.total == pytest.approx(67500)
    assert receipt.confirmation.reference.startswith("CARD-")


@pytest.mark.asyncio
async def test_paypal_tag_is_case_insensitive(catalog, settings, lines, emit):
    placement = OrderPlacement(settings, emit=emit)
    order = laptop_order(catalog, emit)

    placement.place(order, "PayPal")
    await placement.drain()

    assert "PayPal Payment Successful: ₹67500.00" in lines
    assert order.status == COMPLETED


@pytest.mark.asyncio
async def test_unsupported_payment_fails_inside_workflow(catalog, settings, lines, emit):
    placement = OrderPlacement(settings, emit=emit)
    order = laptop_order(catalog, emit)

    with capture_logs() as logs:
        placement.place(order, "bogus")
        outcomes = await placement.drain()

    assert order.status is None
    assert not any("Payment Successful" in line for line in lines)
    assert not any("Notification" in line for line in lines)
    assert lines[-1] == "Order failed: Invalid payment type: 'bogus'"

    (outcome,) = outcomes
    assert not outcome.succeeded
    match outcome.result:
        case Error(e):
            assert e.error.code == "UNSUPPORTED_PAYMENT"
            assert e.step_failed == 2
        case Ok(_):
            pytest.fail("bogus payment must fail")

    failed = [entry for entry in logs if entry["event"] == "order.failed"]
    assert len(failed) == 1
    assert failed[0]["order_id"] == order.id
    assert failed[0]["code"] == "UNSUPPORTED_PAYMENT"
    assert failed[0]["payment"] == "bogus"
    assert failed[0]["log_level"] == "warning"


@pytest.mark.asyncio
async def test_observer_failure_voids_payment(catalog, settings, lines, emit):
    order = Order()
    order.add_item(catalog.require(2))
    order.add_observer(Exploding())

    result = await run_checkout(order, "card", delay=0, emit=emit)

    match result:
        case Error(e):
            assert e.error.code == "UNEXPECTED"
            assert "sms gateway down" in e.error.message
            assert e.step_failed == 3
            assert e.compensators_run == 1
        case Ok(_):
            pytest.fail("observer failure must fail the workflow")
    assert lines[0] == "Credit Card Payment Successful: ₹1200.00"
    assert lines[1].startswith("Credit Card Payment Voided: ₹1200.00 (CARD-")
    # a voided charge never leaves a COMPLETED order behind
    assert order.status is None


@pytest.mark.asyncio
async def test_voided_order_keeps_its_earlier_status(catalog, settings, lines, emit):
    placement = OrderPlacement(settings, emit=emit)
    order = Order()
    order.add_item(catalog.require(2))
    order.restore_status("PENDING")
    order.add_observer(Exploding())

    placement.place(order, "card")
    (outcome,) = await placement.drain()

    assert not outcome.succeeded
    assert order.status == "PENDING"
    assert any("Payment Voided" in line for line in lines)
    assert lines[-1] == "Order failed: RuntimeError: sms gateway down"


@pytest.mark.asyncio
async def test_caller_never_sees_workflow_errors(catalog, settings, emit):
    placement = OrderPlacement(settings, emit=emit)
    order = Order()
    order.add_observer(Exploding())

    placement.place(order, "card")
    outcomes = await placement.drain()

    assert [o.succeeded for o in outcomes] == [False]


@pytest.mark.asyncio
async def test_pool_limits_concurrent_workflows(catalog, emit):
    placement = OrderPlacement(Settings(pool_size=2, processing_delay=0.2), emit=emit)
    orders = [laptop_order(catalog, emit) for _ in range(3)]

    for order in orders:
        placement.place(order, "card")
    await asyncio.sleep(0.05)

    assert placement.running == 2
    assert placement.pending == 3

    outcomes = await placement.drain()

    assert len(outcomes) == 3
    assert all(o.succeeded for o in outcomes)
    assert all(order.status == COMPLETED for order in orders)


@pytest.mark.asyncio
async def test_bounded_drain_returns_early(catalog, emit):
    placement = OrderPlacement(Settings(processing_delay=5, drain_timeout=0), emit=emit)
    placement.place(laptop_order(catalog, emit), "card")

    outcomes = await placement.drain(timeout=0.01)

    assert outcomes == ()
    assert placement.pending == 1
    await placement.shutdown()


@pytest.mark.asyncio
async def test_shutdown_interrupts_unfinished_work(catalog, lines, emit):
    placement = OrderPlacement(
        Settings(pool_size=2, processing_delay=10, drain_timeout=0),
        emit=emit,
    )
    orders = [laptop_order(catalog, emit) for _ in range(3)]
    for order in orders:
        placement.place(order, "card")
    await asyncio.sleep(0.01)

    with capture_logs() as logs:
        outcomes = await placement.shutdown()

    assert len(outcomes) == 3
    assert {o.result.unwrap_err().error.code for o in outcomes} == {"INTERRUPTED"}
    assert sorted(o.result.unwrap_err().step_failed for o in outcomes) == [0, 1, 1]
    assert all(order.status is None for order in orders)
    assert not any("Payment Successful" in line for line in lines)
    assert placement.pending == 0
    assert any(entry["event"] == "placement.cancelled" for entry in logs)


@pytest.mark.asyncio
async def test_place_after_shutdown_is_refused(catalog, settings, emit):
    placement = OrderPlacement(settings, emit=emit)
    await placement.shutdown()

    with pytest.raises(RuntimeError, match="shut down"):
        placement.place(laptop_order(catalog, emit), "card")


@pytest.mark.asyncio
async def test_drain_with_nothing_scheduled(settings, emit):
    assert await OrderPlacement(settings, emit=emit).drain() == ()
