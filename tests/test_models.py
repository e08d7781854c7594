"""
Tests for card response resolution, request models and error parsing
"""
import json
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from accessgrid.models.base import AccessGridModel
from accessgrid.models.card import (
    Card,
    CardState,
    ListKeysFilter,
    ProvisionCardRequest,
    UnifiedAccessPass,
    UpdateCardRequest,
    resolve_card_response,
)
from accessgrid.models.errors import APIError, DecodeError, NotFoundError, RateLimitError
from accessgrid.models.template import EventLogFilter, UpdateTemplateRequest, format_rfc3339


class TestResolveCardResponse:
    """Tests for the card / unified access pass discriminant."""

    def test_plain_card(self, mock_responses):
        result = resolve_card_response(mock_responses["card"])

        assert isinstance(result, Card)
        assert result.id == "0xc4rd1d"
        assert result.url == "https://accessgrid.com/install/0xc4rd1d"
        assert result.state == CardState.ACTIVE

    def test_unified_access_pass(self, mock_responses):
        result = resolve_card_response(mock_responses["unified_access_pass"])

        assert isinstance(result, UnifiedAccessPass)
        assert len(result.details) == 2
        assert all(isinstance(card, Card) for card in result.details)
        assert result.details[1].id == "0xc4rd2d"

    def test_empty_details_is_card(self):
        result = resolve_card_response({"id": "0xc4rd1d", "details": []})

        assert isinstance(result, Card)

    def test_null_details_is_card(self):
        assert isinstance(resolve_card_response({"id": "0xc4rd1d", "details": None}), Card)

    def test_accepts_raw_text_and_bytes(self, mock_responses):
        text = json.dumps(mock_responses["unified_access_pass"])

        assert isinstance(resolve_card_response(text), UnifiedAccessPass)
        assert isinstance(resolve_card_response(text.encode("utf-8")), UnifiedAccessPass)

    def test_invalid_json_fails_peek(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response("{not json")

        assert exc_info.value.stage == "peek"
        assert exc_info.value.raw_body == "{not json"

    def test_non_object_fails_peek(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response([{"id": "0xc4rd1d"}])

        assert exc_info.value.stage == "peek"

    def test_missing_id_still_decodes(self):
        result = resolve_card_response({"full_name": "Employee name", "state": "active"})

        assert isinstance(result, Card)
        assert result.id is None
        assert result.full_name == "Employee name"

    def test_details_not_a_list_fails_peek(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response('{"id": "0xc4rd1d", "details": "oops"}')

        assert exc_info.value.stage == "peek"
        assert "str" in exc_info.value.message

    def test_details_object_fails_peek(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response({"id": "0xc4rd1d", "details": {"id": "0xc4rd2d"}})

        assert exc_info.value.stage == "peek"

    def test_bad_card_fails_full_decode(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response({"id": ["not", "a", "string"]})

        assert exc_info.value.stage == "card"

    def test_bad_detail_fails_unified_decode(self):
        with pytest.raises(DecodeError) as exc_info:
            resolve_card_response({"id": "0xp455", "details": ["not-a-card"]})

        assert exc_info.value.stage == "unified_access_pass"


class TestRequestModels:
    """Tests for request serialization."""

    def test_provision_drops_unset_fields(self):
        request = ProvisionCardRequest(
            card_template_id="0xd3adb00b5",
            full_name="Employee name",
            start_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
        )

        body = request.to_dict()

        assert body["card_template_id"] == "0xd3adb00b5"
        assert body["start_date"].startswith("2023-01-01T00:00:00")
        assert "email" not in body
        assert "site_code" not in body

    def test_update_includes_card_id(self):
        body = UpdateCardRequest(card_id="0xc4rd1d", full_name="New").to_dict()

        assert body == {"card_id": "0xc4rd1d", "full_name": "New"}

    def test_update_template_includes_id(self):
        body = UpdateTemplateRequest(card_template_id="0xd3adb00b5", name="Renamed").to_dict()

        assert body == {"card_template_id": "0xd3adb00b5", "name": "Renamed"}

    def test_list_filter_params(self):
        assert ListKeysFilter().to_params() == {}
        assert ListKeysFilter(template_id="0xd3adb00b5", state="active").to_params() == {
            "template_id": "0xd3adb00b5",
            "state": "active",
        }

    def test_list_filter_skips_empty_strings(self):
        assert ListKeysFilter(template_id="", employee_id="123456789").to_params() == {"employee_id": "123456789"}

    def test_params_render_dates_and_booleans(self):
        class Query(AccessGridModel):
            since: Optional[datetime] = None
            active: Optional[bool] = None
            limit: Optional[int] = None

        params = Query(since=datetime(2023, 1, 1, tzinfo=timezone.utc), active=False, limit=10).to_params()

        assert params == {"since": "2023-01-01T00:00:00Z", "active": "false", "limit": "10"}


class TestEventLogFilter:
    """Tests for event log query parameters."""

    def test_empty_filter_sends_nothing(self):
        assert EventLogFilter().to_params() == {}

    def test_dates_are_rfc3339(self):
        params = EventLogFilter(
            start_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
            end_date=datetime(2023, 1, 31, 23, 59, 59, tzinfo=timezone.utc),
        ).to_params()

        assert params == {
            "start_date": "2023-01-01T00:00:00Z",
            "end_date": "2023-01-31T23:59:59Z",
        }

    def test_naive_datetime_treated_as_utc(self):
        assert format_rfc3339(datetime(2023, 6, 1, 8, 30, 0, 123456)) == "2023-06-01T08:30:00Z"

    def test_offset_preserved(self):
        tz = timezone(timedelta(hours=-5))
        assert format_rfc3339(datetime(2023, 6, 1, 8, 30, tzinfo=tz)) == "2023-06-01T08:30:00-05:00"


class TestAPIErrorFromResponse:
    """Tests for APIError.from_response."""

    def test_message_preferred_over_error(self):
        err = APIError.from_response(400, '{"message": "m", "error": "e"}')
        assert err.message == "m"
        assert err.status_code == 400

    def test_empty_message_falls_back_to_error(self):
        err = APIError.from_response(400, '{"message": "", "error": "e"}')
        assert err.message == "e"

    def test_json_without_fields_uses_raw_body(self):
        err = APIError.from_response(400, '{"detail": "x"}')
        assert err.message == '{"detail": "x"}'

    def test_request_id_header_fallback(self):
        err = APIError.from_response(503, "unavailable", {"X-Request-ID": "req_9"})
        assert err.request_id == "req_9"
        assert err.message == "unavailable"

    def test_no_request_id(self):
        err = APIError.from_response(400, "bad")
        assert err.request_id is None
        assert "request ID" not in str(err)

    def test_subclass_selection(self):
        assert isinstance(APIError.from_response(404, "{}"), NotFoundError)
        rate_limited = APIError.from_response(429, "{}", {"Retry-After": "3"})
        assert isinstance(rate_limited, RateLimitError)
        assert rate_limited.retry_after == 3
        assert rate_limited.retryable is True

    def test_to_dict_shape(self):
        err = APIError.from_response(400, '{"message": "m", "request_id": "r"}')
        as_dict = err.to_dict()
        assert as_dict["error"]["message"] == "m"
        assert as_dict["error"]["request_id"] == "r"
