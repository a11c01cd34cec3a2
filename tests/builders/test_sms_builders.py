"""Testes dos builders SMS."""

from __future__ import annotations

import pytest

from infobip_channels.builders import (
    BinaryMessageBuilder,
    DestinationBuilder,
    MessageBuilder,
    SendBinaryRequestBuilder,
    SendRequestBuilder,
)
from infobip_channels.models.sms import (
    DeliveryDay,
    Destination,
    Message,
    SendBinaryRequest,
    SendRequest,
    TimeUnit,
    UrlOptions,
)
from infobip_channels.utils.errors import BuildError, MissingRequiredField
from infobip_channels.validators import Reason, validate


class TestDestinationBuilder:
    def test_build(self) -> None:
        destination = DestinationBuilder().to("41793026727").message_id("m1").build()
        assert destination == Destination(to="41793026727", message_id="m1")

    def test_missing_to(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            DestinationBuilder().message_id("m1").build()
        assert exc_info.value.field == "to"
        assert str(exc_info.value) == "missing required field: to"

    def test_setters_do_not_validate(self) -> None:
        destination = DestinationBuilder().to("abc").build()
        assert validate(destination).violations[0].reason == Reason.BAD_FORMAT


class TestMessageBuilder:
    def test_message_without_destinations(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            MessageBuilder().text("Olá").build()
        assert exc_info.value.field == "destinations"

    def test_empty_destinations_count_as_set(self) -> None:
        message = MessageBuilder().destinations([]).text("Olá").build()
        assert message.destinations == ()
        assert [(v.field, v.reason) for v in validate(message).violations] == [
            ("destinations", Reason.MISSING_REQUIRED)
        ]

    def test_full_message(self) -> None:
        message = (
            MessageBuilder()
            .add_destination("41793026727", message_id="m1")
            .add_destination(Destination(to="41793026731"))
            .sender("InfoSMS")
            .text("Olá")
            .flash()
            .language("TR")
            .transliteration("TURKISH")
            .delivery_time_window(["MONDAY", "TUESDAY"], start=(9, 0), end=(17, 30))
            .india_dlt("entity-1", content_template_id="tpl")
            .turkey_iys("TACIR", brand_code=7)
            .validity_period(720)
            .build()
        )

        assert isinstance(message, Message)
        assert [d.to for d in message.destinations] == ["41793026727", "41793026731"]
        assert message.from_ == "InfoSMS"
        assert message.language.language_code == "TR"
        assert message.delivery_time_window.days == (DeliveryDay.MONDAY, DeliveryDay.TUESDAY)
        assert message.delivery_time_window.to.minute == 30
        assert message.regional.india_dlt.principal_entity_id == "entity-1"
        assert message.regional.turkey_iys.brand_code == 7
        assert validate(message).is_valid

    def test_wrong_type_raises_build_error(self) -> None:
        builder = MessageBuilder().add_destination("41793026727").validity_period("soon")
        with pytest.raises(BuildError, match="validity_period"):
            builder.build()

    def test_builder_is_reusable(self) -> None:
        builder = MessageBuilder().add_destination("41793026727").text("Olá")
        assert builder.build() == builder.build()


class TestBinaryMessageBuilder:
    def test_requires_binary(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            BinaryMessageBuilder().add_destination("41793026727").build()
        assert exc_info.value.field == "binary"

    def test_build(self) -> None:
        message = (
            BinaryMessageBuilder()
            .add_destination("41793026727")
            .binary("0f c2 4a bf 34 13 ba", data_coding=0, esm_class=0)
            .build()
        )
        assert message.binary.hex == "0f c2 4a bf 34 13 ba"
        assert validate(message).is_valid


class TestAddDestination:
    def test_explicit_message_id_overrides_destination(self) -> None:
        message = (
            MessageBuilder()
            .add_destination(Destination(to="41793026727", message_id="own"), message_id="x")
            .text("Olá")
            .build()
        )
        assert message.destinations[0] == Destination(to="41793026727", message_id="x")

    def test_destination_keeps_its_message_id(self) -> None:
        message = (
            MessageBuilder()
            .add_destination(Destination(to="41793026727", message_id="own"))
            .add_destination("41793026731", message_id="m2")
            .text("Olá")
            .build()
        )
        assert [d.message_id for d in message.destinations] == ["own", "m2"]


class TestSendRequestBuilder:
    def test_missing_messages(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            SendRequestBuilder().bulk_id("bulk-1").build()
        assert exc_info.value.field == "messages"

    def test_default_sender_applies_only_to_messages_without_sender(self) -> None:
        own = MessageBuilder().add_destination("41793026727").sender("Own").text("a").build()
        request = (
            SendRequestBuilder()
            .add_message(own)
            .add_message(MessageBuilder().add_destination("41793026731").text("b"))
            .default_sender("Default")
            .build()
        )
        assert isinstance(request, SendRequest)
        assert [m.from_ for m in request.messages] == ["Own", "Default"]

    def test_speed_limit_and_url_options(self) -> None:
        request = (
            SendRequestBuilder()
            .add_message(MessageBuilder().add_destination("41793026727").text("a"))
            .sending_speed_limit(10, "HOUR")
            .url_options(UrlOptions(shorten_url=True, track_clicks=True))
            .build()
        )
        assert request.sending_speed_limit.time_unit == TimeUnit.HOUR
        assert validate(request).is_valid


class TestSendBinaryRequestBuilder:
    def test_missing_messages(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            SendBinaryRequestBuilder().bulk_id("bulk-1").build()
        assert exc_info.value.field == "messages"

    def test_build(self) -> None:
        own = (
            BinaryMessageBuilder()
            .add_destination("41793026727")
            .sender("Own")
            .binary("0f c2")
            .build()
        )
        request = (
            SendBinaryRequestBuilder()
            .add_message(own)
            .add_message(BinaryMessageBuilder().add_destination("41793026731").binary("4a"))
            .default_sender("Default")
            .sending_speed_limit(5, TimeUnit.MINUTE)
            .build()
        )
        assert isinstance(request, SendBinaryRequest)
        assert [m.from_ for m in request.messages] == ["Own", "Default"]
        assert validate(request).is_valid
