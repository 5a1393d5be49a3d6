"""Shared BDD fixtures and step definitions for the Shelf domain."""

import pytest
from pytest_bdd import given, parsers, then, when
from shelf.errors import ShelfError
from shelf.item.actions import AdjustmentDirection
from shelf.publishing.port import EventKind, ShelfEvent


@pytest.fixture()
def outcome():
    """What the last When step produced: the item dto or the failure cause."""
    return {}


def _perform(outcome, call):
    outcome.clear()
    try:
        outcome["item"] = call()
    except ShelfError as exc:
        outcome["error"] = exc


# ---------------------------------------------------------------------------
# Given / When steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('menu item {item_id:d} "{name}" is put on the shelf with {quantity:d} items'))
def _(kitchen, outcome, item_id, name, quantity):
    _perform(outcome, lambda: kitchen.service.create_item(item_id=item_id, item_name=name, quantity=quantity))


@when(parsers.cfparse('menu item {item_id:d} "{name}" is put on the shelf with {quantity:d} items'))
def _(kitchen, outcome, item_id, name, quantity):
    _perform(outcome, lambda: kitchen.service.create_item(item_id=item_id, item_name=name, quantity=quantity))


@given(parsers.cfparse("{amount:d} items of menu item {item_id:d} are added"))
def _(kitchen, outcome, amount, item_id):
    _perform(outcome, lambda: kitchen.service.adjust_item(item_id, AdjustmentDirection.INCREASE, amount))


@when(parsers.cfparse("{amount:d} items of menu item {item_id:d} are added"))
def _(kitchen, outcome, amount, item_id):
    _perform(outcome, lambda: kitchen.service.adjust_item(item_id, AdjustmentDirection.INCREASE, amount))


@when(parsers.cfparse("{amount:d} items of menu item {item_id:d} are taken"))
def _(kitchen, outcome, amount, item_id):
    _perform(outcome, lambda: kitchen.service.adjust_item(item_id, AdjustmentDirection.DECREASE, amount))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("menu item {item_id:d} has {quantity:d} items at version {version:d}"))
def _(stored, item_id, quantity, version):
    item = stored(item_id)
    assert item.quantity == quantity
    assert item.version == version


@then(parsers.cfparse("a {kind} event for menu item {item_id:d} with {quantity:d} items is emitted"))
def _(event_sink, kind, item_id, quantity):
    assert event_sink.events[-1] == ShelfEvent(kind=EventKind(kind), item_id=item_id, quantity=quantity)


@then(parsers.cfparse("the action is rejected as {kind}"))
def _(outcome, kind):
    assert "item" not in outcome
    assert outcome["error"].kind == kind


@then(parsers.cfparse("the shelf is short by {shortfall:d} items"))
def _(outcome, shortfall):
    assert outcome["error"].shortfall == shortfall


@then("no menu item is available")
def _(kitchen):
    assert kitchen.queries.find_all_available() == []
