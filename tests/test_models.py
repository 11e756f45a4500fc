"""Response record decoding."""

from decimal import Decimal

import pydantic
import pytest

from polydata import (
    Activity,
    ApiError,
    DecodeError,
    ErrorResponse,
    GetActivityParams,
    Position,
    SortDirection,
    Trade,
)
from polydata.client import endpoints as ep
from polydata.client.response import classify
from polydata.client.transport import HttpResponse


def test_camel_case_keys_map_to_attributes():
    trade = Trade.model_validate(
        {"proxyWallet": "0x1", "conditionId": "0xc", "profileImageOptimized": "img", "eventSlug": "ev"}
    )
    assert trade.proxy_wallet == "0x1"
    assert trade.condition_id == "0xc"
    assert trade.profile_image_optimized == "img"
    assert trade.event_slug == "ev"


def test_missing_fields_take_zero_values_and_extras_are_ignored():
    pos = Position.model_validate({"title": "x", "someNewField": 1})
    assert pos.size == Decimal(0)
    assert pos.redeemable is False
    assert pos.outcome_index == 0
    assert not hasattr(pos, "someNewField")


def test_records_are_frozen():
    activity = Activity(size=Decimal("1"))
    with pytest.raises(pydantic.ValidationError):
        activity.size = Decimal("2")


def test_numeric_json_amounts_are_exact():
    body = b'[{"size": 0.1, "price": "0.30000000000000004", "usdcSize": 123456789.123456789}]'
    (row,) = classify(ep.ACTIVITY, HttpResponse(200, body))
    assert row.size == Decimal("0.1")
    assert row.price == Decimal("0.30000000000000004")
    assert row.usdc_size == Decimal("123456789.123456789")


def test_error_response_message_optional():
    assert ErrorResponse.model_validate({}).error is None
    assert ErrorResponse.model_validate({"error": "bad"}).error == "bad"


def test_empty_error_field_falls_back_to_body():
    resp = HttpResponse(400, b'{"error": ""}')
    with pytest.raises(ApiError) as exc:
        classify(ep.TRADES, resp)
    assert exc.value.message == '{"error": ""}'


def test_wrong_shape_is_decode_error():
    with pytest.raises(DecodeError):
        classify(ep.ACTIVITY, HttpResponse(200, b'{"not": "a list"}'))


def test_params_accept_wire_names_and_enum_strings():
    params = GetActivityParams(user="0x1", eventId=[1, 2], sort_direction="DESC")
    assert params.event_id == [1, 2]
    assert params.sort_direction is SortDirection.DESC


def test_null_fields_decode_to_zero_values():
    body = b'[{"side": "BUY", "size": "1", "price": null, "name": null, "bio": null, "profileImage": null}]'
    (trade,) = classify(ep.TRADES, HttpResponse(200, body))
    assert trade.side == "BUY"
    assert trade.size == Decimal("1")
    assert trade.price == Decimal(0)
    assert trade.name == ""
    assert trade.bio == ""
    assert trade.profile_image == ""


def test_null_nested_list_decodes_empty():
    (volume,) = classify(ep.LIVE_VOLUME, HttpResponse(200, b'[{"total": null, "markets": null}]'))
    assert volume.total == Decimal(0)
    assert volume.markets == []
