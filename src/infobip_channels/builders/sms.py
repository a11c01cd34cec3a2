"""Builders do canal SMS.

Sub-estruturas (janela de entrega, opções regionais, limite de
velocidade) são guardadas como dicionários brutos e só viram modelos
em ``build()``, onde erros de tipo aparecem como BuildError.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, TypeVar

from infobip_channels.builders.base import ModelBuilder
from infobip_channels.models.common import WireModel
from infobip_channels.models.sms import (
    BinaryMessage,
    Destination,
    Message,
    SendBinaryRequest,
    SendRequest,
    TimeUnit,
    Tracking,
    UrlOptions,
)

RequestT = TypeVar("RequestT", bound=WireModel)


class DestinationBuilder(ModelBuilder[Destination]):
    model = Destination
    required_fields = ("to",)

    def to(self, value: str) -> DestinationBuilder:
        return self._set("to", value)

    def message_id(self, value: str) -> DestinationBuilder:
        return self._set("message_id", value)


class _MessageOptionsMixin:
    """Setters comuns a mensagens de texto e binárias."""

    _values: dict[str, Any]

    def destinations(self, destinations: Iterable[Destination | dict[str, Any]]) -> Any:
        """Substitui a lista de destinos (lista vazia conta como informada)."""
        return self._set("destinations", tuple(destinations))

    def add_destination(self, to: str | Destination, message_id: str | None = None) -> Any:
        """Acrescenta um destino; ``message_id`` explícito sobrepõe o do Destination."""
        destination: Destination | dict[str, Any]
        if isinstance(to, Destination):
            destination = (
                to if message_id is None else to.model_copy(update={"message_id": message_id})
            )
        else:
            destination = {"to": to, "message_id": message_id}
        current = self._values.get("destinations") or ()
        return self._set("destinations", (*current, destination))

    def sender(self, value: str) -> Any:
        return self._set("from_", value)

    def callback_data(self, value: str) -> Any:
        return self._set("callback_data", value)

    def delivery_time_window(
        self,
        days: Iterable[str],
        start: tuple[int, int] | None = None,
        end: tuple[int, int] | None = None,
    ) -> Any:
        """Janela de entrega; ``start``/``end`` são pares (hora, minuto) UTC."""
        window: dict[str, Any] = {"days": tuple(days)}
        if start is not None:
            window["from_"] = {"hour": start[0], "minute": start[1]}
        if end is not None:
            window["to"] = {"hour": end[0], "minute": end[1]}
        return self._set("delivery_time_window", window)

    def flash(self, value: bool = True) -> Any:
        return self._set("flash", value)

    def intermediate_report(self, value: bool = True) -> Any:
        return self._set("intermediate_report", value)

    def notify_url(self, value: str) -> Any:
        return self._set("notify_url", value)

    def notify_content_type(self, value: str) -> Any:
        return self._set("notify_content_type", value)

    def india_dlt(self, principal_entity_id: str, content_template_id: str | None = None) -> Any:
        dlt = {"principal_entity_id": principal_entity_id}
        if content_template_id is not None:
            dlt["content_template_id"] = content_template_id
        return self._set_regional("india_dlt", dlt)

    def turkey_iys(self, recipient_type: str, brand_code: int | None = None) -> Any:
        iys: dict[str, Any] = {"recipient_type": recipient_type}
        if brand_code is not None:
            iys["brand_code"] = brand_code
        return self._set_regional("turkey_iys", iys)

    def send_at(self, value: str) -> Any:
        return self._set("send_at", value)

    def validity_period(self, minutes: int) -> Any:
        return self._set("validity_period", minutes)

    def _set_regional(self, key: str, value: dict[str, Any]) -> Any:
        regional = dict(self._values.get("regional") or {})
        regional[key] = value
        return self._set("regional", regional)


class MessageBuilder(_MessageOptionsMixin, ModelBuilder[Message]):
    """Mensagem de texto.

    Exemplo:
        message = (
            MessageBuilder()
            .add_destination("41793026727")
            .text("Olá")
            .build()
        )
    """

    model = Message
    required_fields = ("destinations",)

    def text(self, value: str) -> MessageBuilder:
        return self._set("text", value)

    def language(self, code: str) -> MessageBuilder:
        return self._set("language", {"language_code": code})

    def transliteration(self, value: str) -> MessageBuilder:
        return self._set("transliteration", value)


class BinaryMessageBuilder(_MessageOptionsMixin, ModelBuilder[BinaryMessage]):
    model = BinaryMessage
    required_fields = ("destinations", "binary")

    def binary(
        self,
        hex: str,
        data_coding: int | None = None,
        esm_class: int | None = None,
    ) -> BinaryMessageBuilder:
        data: dict[str, Any] = {"hex": hex}
        if data_coding is not None:
            data["data_coding"] = data_coding
        if esm_class is not None:
            data["esm_class"] = esm_class
        return self._set("binary", data)


class _BulkRequestBuilder(ModelBuilder[RequestT]):
    """Envelope de 1..N mensagens com remetente padrão.

    ``default_sender`` não é campo do payload: é aplicado em ``build()`` a
    toda mensagem sem remetente próprio.
    """

    message_type: ClassVar[type[Message] | type[BinaryMessage]]
    message_builder: ClassVar[type[ModelBuilder[Any]]]
    required_fields = ("messages",)

    def __init__(self) -> None:
        super().__init__()
        self._default_sender: str | None = None

    def messages(self, messages: Iterable[Any]) -> Any:
        return self._set("messages", tuple(messages))

    def add_message(self, message: Any) -> Any:
        if isinstance(message, self.message_builder):
            message = message.build()
        current = self._values.get("messages") or ()
        return self._set("messages", (*current, message))

    def default_sender(self, value: str) -> Any:
        self._default_sender = value
        return self

    def bulk_id(self, value: str) -> Any:
        return self._set("bulk_id", value)

    def sending_speed_limit(
        self,
        amount: int,
        time_unit: TimeUnit | str | None = None,
    ) -> Any:
        limit: dict[str, Any] = {"amount": amount}
        if time_unit is not None:
            limit["time_unit"] = time_unit
        return self._set("sending_speed_limit", limit)

    def _payload(self) -> dict[str, Any]:
        payload = super()._payload()
        if self._default_sender is not None and "messages" in payload:
            payload["messages"] = tuple(
                message.model_copy(update={"from_": self._default_sender})
                if isinstance(message, self.message_type) and message.from_ is None
                else message
                for message in payload["messages"]
            )
        return payload


class SendRequestBuilder(_BulkRequestBuilder[SendRequest]):
    """Requisição de envio de texto com 1..N mensagens."""

    model = SendRequest
    message_type = Message
    message_builder = MessageBuilder

    def url_options(self, options: UrlOptions) -> SendRequestBuilder:
        return self._set("url_options", options)

    def tracking(self, tracking: Tracking) -> SendRequestBuilder:
        return self._set("tracking", tracking)


class SendBinaryRequestBuilder(_BulkRequestBuilder[SendBinaryRequest]):
    model = SendBinaryRequest
    message_type = BinaryMessage
    message_builder = BinaryMessageBuilder
