"""decode_response: status class selects the schema, bad bodies become DecodeError."""

from __future__ import annotations

import pytest

from mailjet_send.adapters.mailjet import ApiError, BatchResponse, Response, decode_response
from mailjet_send.domain.enums import SendAPIVersion
from mailjet_send.domain.errors import ConfigurationError, DecodeError, ProviderError


@pytest.mark.os_agnostic
def test_v3_success_without_uuid_is_accepted() -> None:
    response = decode_response(SendAPIVersion.V3, 200, b'{"Sent":[{"Email":"c@d.com","MessageID":111111111111111}]}')

    assert isinstance(response, Response)
    assert response.sent[0].message_uuid is None
    assert response.sent[0].message_id == 111111111111111


@pytest.mark.os_agnostic
def test_success_body_missing_required_fields_is_a_decode_error() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_response(SendAPIVersion.V3, 200, b'{"Sent":[{"Email":"c@d.com"}]}')

    assert exc_info.value.raw == b'{"Sent":[{"Email":"c@d.com"}]}'


@pytest.mark.os_agnostic
def test_v3_1_success_decodes_into_batch_response() -> None:
    response = decode_response(SendAPIVersion.V3_1, 200, b'{"Messages":[{"Status":"success"}]}')

    assert isinstance(response, BatchResponse)
    assert response.messages[0].to == []


@pytest.mark.os_agnostic
def test_v4_has_no_success_model() -> None:
    with pytest.raises(ConfigurationError):
        decode_response(SendAPIVersion.V4, 200, b"{}")


@pytest.mark.os_agnostic
def test_empty_error_envelope_still_raises_provider_error() -> None:
    with pytest.raises(ProviderError) as exc_info:
        decode_response(SendAPIVersion.V3, 404, b"{}")

    assert exc_info.value.message is None
    assert str(exc_info.value) == "Mailjet API error 404: request rejected"


@pytest.mark.os_agnostic
def test_error_envelope_that_is_not_an_object_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_response(SendAPIVersion.V3, 400, b'["not", "an", "object"]')


@pytest.mark.os_agnostic
def test_v3_1_error_message_is_taken_from_per_message_errors() -> None:
    body = b'{"Messages":[{"Status":"error","Errors":[{"ErrorMessage":"Type mismatch","StatusCode":400}]}]}'

    with pytest.raises(ProviderError) as exc_info:
        decode_response(SendAPIVersion.V3_1, 400, body)

    assert exc_info.value.message == "Type mismatch"


@pytest.mark.os_agnostic
def test_api_error_keeps_unknown_fields() -> None:
    envelope = ApiError.model_validate({"ErrorInfo": "Bad request", "ErrorRelatedTo": ["FromEmail"]})

    assert envelope.describe() == "Bad request"
    assert envelope.model_extra == {"ErrorRelatedTo": ["FromEmail"]}


@pytest.mark.os_agnostic
def test_api_error_accepts_numeric_error_code() -> None:
    assert ApiError.model_validate({"ErrorCode": 13}).error_code == 13
