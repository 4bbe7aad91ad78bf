import pytest

from hft_trading.messages import (
    AccountQueryRequest,
    CancelOrderRequest,
    DisableOrderEntryRequest,
    EnableOrderEntryRequest,
    EnterOrderRequest,
    MassCancelRequest,
    ModifyOrderRequest,
    ReplaceOrderRequest,
    format_alpha,
)


def _le(value, width):
    return value.to_bytes(width, "little")


MESSAGE_1 = (
    b"O" + _le(1, 4) + b"B" + _le(100, 4) + b"GOOG    " + bytes(8)
    + b"0YAYN" + b"ID_1" + b" " * 10 + bytes(2)
)

PRICE_4 = b"\x00\x00\x00\x00\x00\x01\x12\x15"
MESSAGE_4 = (
    b"O" + _le(4, 4) + b"B" + _le(50, 4) + b"BABA    " + PRICE_4
    + b"EYONN" + b"ID_4" + b" " * 10 + bytes(2)
)

ENTER = EnterOrderRequest("O", 5, "B", 200, b"AAPL    ", 1500000, "0", "Y", "A", "Y", "N",
                          b"ID_5".ljust(14), 9)
REPLACE = ReplaceOrderRequest("U", 1, 2, 300, 1505000, "0", "Y", "N", b"ID_9".ljust(14), 0)
CANCEL = CancelOrderRequest("X", 3, 0, 0)
MODIFY = ModifyOrderRequest("M", 4, "S", 50, 0)
MASS_CANCEL = MassCancelRequest("C", 5, b"FIRM", b"AAPL    ", 0)
DISABLE = DisableOrderEntryRequest("D", 6, b"FIRM", 0)
ENABLE = EnableOrderEntryRequest("E", 7, b"FIRM", 0)
QUERY = AccountQueryRequest("Q", 0)


def test_enter_order_decodes_source_message():
    order = EnterOrderRequest.from_bytes(MESSAGE_1)
    assert order.message_type == "O"
    assert order.user_ref_num == 1
    assert order.side == "B"
    assert order.quantity == 100
    assert order.symbol == b"GOOG    "
    assert order.price == 0
    assert order.time_in_force == "0"
    assert order.display == "Y"
    assert order.capacity == "A"
    assert order.inter_market_sweep_eligibility == "Y"
    assert order.cross_type == "N"
    assert format_alpha(order.cl_ord_id) == "ID_1"
    assert order.appendage_length == 0


def test_enter_order_price_is_little_endian():
    order = EnterOrderRequest.from_bytes(MESSAGE_4)
    assert order.price == int.from_bytes(PRICE_4, "little")
    assert order.time_in_force == "E"
    assert order.capacity == "O"


def test_enter_order_wire_size_and_round_trip():
    order = EnterOrderRequest.from_bytes(MESSAGE_1)
    assert len(MESSAGE_1) == 47
    assert order.to_bytes() == MESSAGE_1


def test_enter_order_ignores_trailing_appendage():
    base = MESSAGE_1[:45] + _le(9, 2)
    order = EnterOrderRequest.from_bytes(base + b"\x01" * 9)
    assert order.appendage_length == 9
    assert order.to_bytes() == base


def test_enter_order_str_matches_debug_layout():
    order = EnterOrderRequest.from_bytes(MESSAGE_1)
    assert str(order) == (
        "EnterOrderRequest { type: 'O', user_ref_num: 1, side: 'B', quantity: 100, "
        'symbol: "GOOG", price: 0, time_in_force: \'0\', display: \'Y\', capacity: \'A\', '
        "ime_eligibility: 'Y', cross_type: 'N', cl_ord_id: \"ID_1\", appendage_length: 0 }"
    )


def test_round_trip_enter_order():
    encoded = ENTER.to_bytes()
    assert encoded[:1] == b"O"
    assert EnterOrderRequest.from_bytes(encoded) == ENTER


def test_round_trip_replace_order():
    encoded = REPLACE.to_bytes()
    assert encoded[:1] == b"U"
    assert ReplaceOrderRequest.from_bytes(encoded) == REPLACE


def test_round_trip_cancel_order():
    encoded = CANCEL.to_bytes()
    assert encoded[:1] == b"X"
    assert CancelOrderRequest.from_bytes(encoded) == CANCEL


def test_round_trip_modify_order():
    encoded = MODIFY.to_bytes()
    assert encoded[:1] == b"M"
    assert ModifyOrderRequest.from_bytes(encoded) == MODIFY


def test_round_trip_mass_cancel():
    encoded = MASS_CANCEL.to_bytes()
    assert encoded[:1] == b"C"
    assert MassCancelRequest.from_bytes(encoded) == MASS_CANCEL


def test_round_trip_disable_order_entry():
    encoded = DISABLE.to_bytes()
    assert encoded[:1] == b"D"
    assert DisableOrderEntryRequest.from_bytes(encoded) == DISABLE


def test_round_trip_enable_order_entry():
    encoded = ENABLE.to_bytes()
    assert encoded[:1] == b"E"
    assert EnableOrderEntryRequest.from_bytes(encoded) == ENABLE


def test_round_trip_account_query():
    encoded = QUERY.to_bytes()
    assert encoded == b"Q\x00\x00"
    assert AccountQueryRequest.from_bytes(encoded) == QUERY


def test_wire_sizes():
    assert len(ENTER.to_bytes()) == 47
    assert len(REPLACE.to_bytes()) == 40
    assert len(CANCEL.to_bytes()) == 11
    assert len(MODIFY.to_bytes()) == 12
    assert len(MASS_CANCEL.to_bytes()) == 19
    assert len(DISABLE.to_bytes()) == 11
    assert len(ENABLE.to_bytes()) == 11
    assert len(QUERY.to_bytes()) == 3


def test_short_input_raises():
    with pytest.raises(ValueError):
        EnterOrderRequest.from_bytes(ENTER.to_bytes()[:-1])
    with pytest.raises(ValueError):
        ReplaceOrderRequest.from_bytes(REPLACE.to_bytes()[:-1])
    with pytest.raises(ValueError):
        CancelOrderRequest.from_bytes(CANCEL.to_bytes()[:-1])
    with pytest.raises(ValueError):
        ModifyOrderRequest.from_bytes(MODIFY.to_bytes()[:-1])
    with pytest.raises(ValueError):
        MassCancelRequest.from_bytes(MASS_CANCEL.to_bytes()[:-1])
    with pytest.raises(ValueError):
        DisableOrderEntryRequest.from_bytes(DISABLE.to_bytes()[:-1])
    with pytest.raises(ValueError):
        EnableOrderEntryRequest.from_bytes(ENABLE.to_bytes()[:-1])
    with pytest.raises(ValueError):
        AccountQueryRequest.from_bytes(QUERY.to_bytes()[:-1])


def test_replace_order_price_offset():
    encoded = REPLACE.to_bytes()
    assert encoded[13:21] == _le(REPLACE.price, 8)
    assert encoded[24:38] == REPLACE.cl_ord_id


def test_mass_cancel_field_offsets():
    encoded = MASS_CANCEL.to_bytes()
    assert encoded[5:9] == MASS_CANCEL.firm
    assert encoded[9:17] == MASS_CANCEL.symbol


def test_from_bytes_accepts_bytearray():
    order = EnterOrderRequest.from_bytes(bytearray(MESSAGE_1))
    assert order == EnterOrderRequest.from_bytes(MESSAGE_1)


@pytest.mark.parametrize(
    "changes",
    [
        {"symbol": b"TOOLONGSYM"},
        {"symbol": b"AB"},
        {"side": "BS"},
        {"quantity": -1},
        {"quantity": 2 ** 32},
    ],
)
def test_to_bytes_rejects_values_that_do_not_fit(changes):
    fields = dict(vars(EnterOrderRequest.from_bytes(MESSAGE_1)))
    fields.update(changes)
    with pytest.raises(ValueError):
        EnterOrderRequest(**fields).to_bytes()


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"GOOG    ", "GOOG"),
        (b"AB\x00CD", "AB"),
        (b"FULLNAME", "FULLNAME"),
        (b"", ""),
    ],
)
def test_format_alpha(raw, expected):
    assert format_alpha(raw) == expected