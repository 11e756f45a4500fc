"""Parameter validation: every failure is raised before any request is sent."""

from decimal import Decimal

import pytest

from conftest import CONDITION_ID, USER
from polydata import (
    ConflictingParameters,
    FilterType,
    GetActivityParams,
    GetClosedPositionsParams,
    GetHoldersParams,
    GetLiveVolumeParams,
    GetOpenInterestParams,
    GetPositionsParams,
    GetTradedMarketsCountParams,
    GetTradesParams,
    GetValueParams,
    IncompleteParameterPair,
    MissingRequiredField,
    OutOfRange,
    TooLong,
)
from polydata.client import endpoints as ep
from polydata.client.validation import is_unset, validate


@pytest.mark.parametrize(
    "method, params, field",
    [
        ("get_activity", GetActivityParams(limit=10), "user"),
        ("get_holders", GetHoldersParams(), "market"),
        ("get_positions", GetPositionsParams(), "user"),
        ("get_closed_positions", GetClosedPositionsParams(), "user"),
        ("get_positions_value", GetValueParams(market=[CONDITION_ID]), "user"),
        ("get_traded_markets_count", GetTradedMarketsCountParams(), "user"),
    ],
)
def test_missing_required_field_makes_no_request(spy_client, spy, ctx, method, params, field):
    with pytest.raises(MissingRequiredField) as exc:
        getattr(spy_client, method)(params, ctx=ctx)
    assert exc.value.field == field
    assert spy.calls == []


@pytest.mark.parametrize(
    "method, params",
    [
        ("get_activity", GetActivityParams(user=USER, market=[CONDITION_ID], event_id=[1])),
        ("get_closed_positions", GetClosedPositionsParams(user=USER, market=[CONDITION_ID], event_id=[1])),
        ("get_trades", GetTradesParams(market=[CONDITION_ID], event_id=[1, 2])),
    ],
)
def test_market_and_event_id_conflict(spy_client, spy, ctx, method, params):
    with pytest.raises(ConflictingParameters) as exc:
        getattr(spy_client, method)(params, ctx=ctx)
    assert exc.value.fields == ("market", "eventId")
    assert spy.calls == []


def test_positions_accepts_market_and_event_id(spy_client, spy, ctx):
    spy_client.get_positions(GetPositionsParams(user=USER, market=[CONDITION_ID], event_id=[1]), ctx=ctx)
    assert len(spy.calls) == 1


@pytest.mark.parametrize(
    "params",
    [
        GetTradesParams(filter_type=FilterType.CASH),
        GetTradesParams(filter_amount=Decimal("10")),
    ],
)
def test_filter_type_and_amount_must_be_paired(spy_client, spy, ctx, params):
    with pytest.raises(IncompleteParameterPair) as exc:
        spy_client.get_trades(params, ctx=ctx)
    assert exc.value.fields == ("filterType", "filterAmount")
    assert spy.calls == []


def test_filter_amount_zero_counts_as_present(spy_client, spy, ctx):
    spy_client.get_trades(GetTradesParams(filter_type="TOKENS", filter_amount=Decimal(0)), ctx=ctx)
    assert "filterType=TOKENS&filterAmount=0" in spy.calls[0][1]


BOUNDS = [
    ("get_activity", GetActivityParams, {"user": USER}, "limit", "limit", 500),
    ("get_activity", GetActivityParams, {"user": USER}, "offset", "offset", 10000),
    ("get_holders", GetHoldersParams, {"market": [CONDITION_ID]}, "limit", "limit", 500),
    ("get_holders", GetHoldersParams, {"market": [CONDITION_ID]}, "min_balance", "minBalance", 999999),
    ("get_positions", GetPositionsParams, {"user": USER}, "limit", "limit", 500),
    ("get_positions", GetPositionsParams, {"user": USER}, "offset", "offset", 10000),
    ("get_closed_positions", GetClosedPositionsParams, {"user": USER}, "limit", "limit", 500),
    ("get_closed_positions", GetClosedPositionsParams, {"user": USER}, "offset", "offset", 10000),
    ("get_trades", GetTradesParams, {}, "limit", "limit", 10000),
    ("get_trades", GetTradesParams, {}, "offset", "offset", 10000),
]


@pytest.mark.parametrize("method, model, base, attr, key, bound", BOUNDS)
def test_value_at_bound_is_accepted(spy_client, spy, ctx, method, model, base, attr, key, bound):
    getattr(spy_client, method)(model(**base, **{attr: bound}), ctx=ctx)
    assert f"{key}={bound}" in spy.calls[0][1]


@pytest.mark.parametrize("method, model, base, attr, key, bound", BOUNDS)
def test_value_past_bound_is_out_of_range(spy_client, spy, ctx, method, model, base, attr, key, bound):
    with pytest.raises(OutOfRange) as exc:
        getattr(spy_client, method)(model(**base, **{attr: bound + 1}), ctx=ctx)
    assert exc.value.field == key
    assert exc.value.value == bound + 1
    assert exc.value.bound == bound
    assert spy.calls == []


@pytest.mark.parametrize("method, model, base, attr, key, bound", BOUNDS)
def test_zero_is_unset_and_omitted(spy_client, spy, ctx, method, model, base, attr, key, bound):
    getattr(spy_client, method)(model(**base, **{attr: 0}), ctx=ctx)
    assert f"{key}=" not in spy.calls[0][1]


def test_negative_limit_fails_lower_bound(spy_client, ctx):
    with pytest.raises(OutOfRange) as exc:
        spy_client.get_activity(GetActivityParams(user=USER, limit=-1), ctx=ctx)
    assert exc.value.lower is True
    assert exc.value.bound == 0


def test_negative_size_threshold_fails(spy_client, ctx):
    with pytest.raises(OutOfRange) as exc:
        spy_client.get_positions(GetPositionsParams(user=USER, size_threshold=Decimal("-0.5")), ctx=ctx)
    assert exc.value.field == "sizeThreshold"


@pytest.mark.parametrize(
    "method, model",
    [("get_positions", GetPositionsParams), ("get_closed_positions", GetClosedPositionsParams)],
)
def test_title_length(spy_client, spy, ctx, method, model):
    getattr(spy_client, method)(model(user=USER, title="x" * 100), ctx=ctx)
    with pytest.raises(TooLong) as exc:
        getattr(spy_client, method)(model(user=USER, title="x" * 101), ctx=ctx)
    assert exc.value.max_length == 100
    assert exc.value.length == 101
    assert len(spy.calls) == 1


def test_missing_user_reported_before_long_title(spy_client, ctx):
    with pytest.raises(MissingRequiredField):
        spy_client.get_positions(GetPositionsParams(title="x" * 101), ctx=ctx)


@pytest.mark.parametrize("event_id", [0, -3])
def test_live_volume_id_must_be_positive(spy_client, spy, ctx, event_id):
    with pytest.raises(OutOfRange) as exc:
        spy_client.get_live_volume(GetLiveVolumeParams(id=event_id), ctx=ctx)
    assert exc.value.field == "id"
    assert exc.value.bound == 1
    assert spy.calls == []


def test_open_interest_needs_no_parameters(spy_client, spy, ctx):
    spy_client.get_open_interest(GetOpenInterestParams(), ctx=ctx)
    assert spy.calls == [("GET", "https://data-api.test/oi")]


def test_wrong_params_type_rejected(spy_client, ctx):
    with pytest.raises(TypeError):
        spy_client.call(ep.ACTIVITY, GetHoldersParams(market=[CONDITION_ID]), ctx)


def test_validate_returns_only_set_values():
    values = validate(ep.POSITIONS, GetPositionsParams(user=USER, redeemable=False, limit=0))
    assert values == {"user": USER, "redeemable": False}


def test_is_unset():
    assert is_unset(None)
    assert is_unset("")
    assert is_unset([])
    assert is_unset(0)
    assert not is_unset(False)
    assert not is_unset(Decimal(0))
    assert not is_unset(1)
