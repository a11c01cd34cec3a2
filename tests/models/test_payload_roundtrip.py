"""Testes de serialização: nomes de fio, omissão de nulos e ida e volta."""

from __future__ import annotations

import pydantic
import pytest

from infobip_channels.builders import (
    BinaryMessageBuilder,
    MessageBuilder,
    SendBinaryRequestBuilder,
    SendEmailBuilder,
    SendRequestBuilder,
    TemplateMessageBuilder,
    WhatsAppMessageBuilder,
    from_payload,
    to_email_form,
    to_payload,
    to_query,
)
from infobip_channels.models.common import ApiErrorDetails
from infobip_channels.models.email import SendEmailRequest
from infobip_channels.models.sms import (
    DeliveryReportsQuery,
    LogsQuery,
    SendBinaryRequest,
    SendRequest,
    SendResponse,
)
from infobip_channels.models.whatsapp import (
    InteractiveButtonsContent,
    LocationContent,
    SendContentRequest,
    SendTemplateRequest,
    TextContent,
)
from infobip_channels.utils.errors import BuildError


def _send_request() -> SendRequest:
    return (
        SendRequestBuilder()
        .bulk_id("bulk-1")
        .add_message(
            MessageBuilder()
            .add_destination("41793026727", message_id="m1")
            .sender("InfoSMS")
            .text("Olá")
            .delivery_time_window(["MONDAY"], start=(9, 0), end=(17, 0))
            .india_dlt("entity-1")
            .notify_content_type("application/json")
        )
        .sending_speed_limit(10, "MINUTE")
        .build()
    )


class TestToPayload:
    def test_sms_wire_names(self) -> None:
        payload = to_payload(_send_request())
        assert payload == {
            "bulkId": "bulk-1",
            "messages": [
                {
                    "destinations": [{"to": "41793026727", "messageId": "m1"}],
                    "text": "Olá",
                    "from": "InfoSMS",
                    "deliveryTimeWindow": {
                        "days": ["MONDAY"],
                        "from": {"hour": 9, "minute": 0},
                        "to": {"hour": 17, "minute": 0},
                    },
                    "notifyContentType": "application/json",
                    "regional": {"indiaDlt": {"principalEntityId": "entity-1"}},
                }
            ],
            "sendingSpeedLimit": {"amount": 10, "timeUnit": "MINUTE"},
        }

    def test_template_wire_names(self) -> None:
        message = (
            TemplateMessageBuilder()
            .sender("441134960000")
            .to("441134960001")
            .template("welcome", language="en")
            .placeholders(["Ana"])
            .sms_failover("InfoSMS", "Olá")
            .build()
        )
        payload = to_payload(SendTemplateRequest(messages=(message,)))
        assert payload["messages"][0]["content"] == {
            "templateName": "welcome",
            "templateData": {"body": {"placeholders": ["Ana"]}},
            "language": "en",
        }
        assert payload["messages"][0]["smsFailover"] == {"from": "InfoSMS", "text": "Olá"}


class TestRoundTrip:
    def test_sms_request(self) -> None:
        request = _send_request()
        assert from_payload(SendRequest, to_payload(request)) == request

    def test_template_request(self) -> None:
        message = (
            TemplateMessageBuilder()
            .sender("441134960000")
            .to("441134960001")
            .template("welcome", language="en")
            .build()
        )
        request = SendTemplateRequest(messages=(message,), bulk_id="b")
        assert from_payload(SendTemplateRequest, to_payload(request)) == request

    @pytest.mark.parametrize(
        "configure",
        [
            lambda b: b.text("Olá", preview_url=True),
            lambda b: b.location(44.8, 20.4, name="Escritório"),
            lambda b: b.interactive_buttons("Escolha", [("yes", "Sim")], footer="Rodapé"),
        ],
    )
    def test_whatsapp_content_request(self, configure) -> None:
        builder = WhatsAppMessageBuilder().sender("441134960000").to("441134960001")
        request = configure(builder).message_id("m1").build()
        content_type = type(request.content)
        assert content_type in (TextContent, LocationContent, InteractiveButtonsContent)

        restored = from_payload(SendContentRequest[content_type], to_payload(request))

        assert restored == request
        assert type(restored.content) is content_type

    def test_binary_request(self) -> None:
        request = (
            SendBinaryRequestBuilder()
            .bulk_id("bulk-1")
            .add_message(
                BinaryMessageBuilder()
                .add_destination("41793026727", message_id="m1")
                .binary("0f c2 4a", data_coding=0, esm_class=64)
                .validity_period(60)
            )
            .default_sender("InfoSMS")
            .build()
        )
        payload = to_payload(request)

        binary = payload["messages"][0]["binary"]
        assert binary == {"hex": "0f c2 4a", "dataCoding": 0, "esmClass": 64}
        assert from_payload(SendBinaryRequest, payload) == request

    def test_email_request(self) -> None:
        request = (
            SendEmailBuilder()
            .sender("Jane <jane@example.com>")
            .to("john@example.com")
            .subject("Assunto")
            .html("<p>Olá</p>")
            .build()
        )
        payload = to_payload(request)

        assert payload["from"] == "Jane <jane@example.com>"
        assert from_payload(SendEmailRequest, payload) == request

    def test_unknown_request_field_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            from_payload(SendRequest, {"messages": [], "unknownField": 1})


class TestResponses:
    def test_send_response_ignores_unknown_fields(self) -> None:
        response = from_payload(
            SendResponse,
            {
                "bulkId": "2034072219640523072",
                "messages": [
                    {
                        "messageId": "2250be2d4219-3af1-78856-aabe-1362af1edfd2",
                        "status": {
                            "groupId": 1,
                            "groupName": "PENDING",
                            "id": 26,
                            "name": "MESSAGE_ACCEPTED",
                            "description": "Message sent to next instance",
                        },
                        "to": "41793026727",
                        "smsCount": 1,
                    }
                ],
            },
        )
        assert response.bulk_id == "2034072219640523072"
        assert response.messages[0].status.group_name == "PENDING"

    def test_error_details(self) -> None:
        details = ApiErrorDetails.model_validate(
            {
                "requestError": {
                    "serviceException": {
                        "messageId": "BAD_REQUEST",
                        "text": "Bad request",
                        "validationErrors": {"messages[0].text": ["must not be blank"]},
                    }
                }
            }
        )
        exception = details.request_error.service_exception
        assert exception.message_id == "BAD_REQUEST"
        assert exception.validation_errors == {"messages[0].text": ["must not be blank"]}


class TestQueryAndForm:
    def test_query_params_are_strings(self) -> None:
        assert to_query(DeliveryReportsQuery(bulk_id="b1", limit=10)) == {
            "bulkId": "b1",
            "limit": "10",
        }

    def test_query_from_alias(self) -> None:
        assert to_query(LogsQuery(from_="InfoSMS")) == {"from": "InfoSMS"}

    def test_email_form_parts(self, tmp_path) -> None:
        attachment = tmp_path / "report.pdf"
        attachment.write_bytes(b"%PDF-1.4")
        request = SendEmailRequest(
            from_="jane@example.com",
            to="john@example.com",
            amp_html="<html amp4email></html>",
            track_clicks=True,
            template_id=5,
            attachment=str(attachment),
        )

        parts = dict(to_email_form(request))

        assert parts["from"] == (None, "jane@example.com")
        assert parts["ampHtml"] == (None, "<html amp4email></html>")
        assert parts["trackClicks"] == (None, "true")
        assert parts["templateId"] == (None, "5")
        assert parts["attachment"] == ("report.pdf", b"%PDF-1.4", "application/pdf")
        assert "cc" not in parts

    def test_email_form_missing_file(self, tmp_path) -> None:
        request = SendEmailRequest(
            to="john@example.com",
            text="x",
            attachment=str(tmp_path / "missing.pdf"),
        )
        with pytest.raises(BuildError, match="attachment file: missing.pdf") as exc_info:
            to_email_form(request)
        assert str(tmp_path) not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
