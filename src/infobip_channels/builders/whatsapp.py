"""Builders do canal WhatsApp."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from infobip_channels.builders.base import ModelBuilder
from infobip_channels.models.common import WireModel
from infobip_channels.models.whatsapp import (
    AudioContent,
    Contact,
    ContactContent,
    DocumentContent,
    FailoverMessage,
    ImageContent,
    InteractiveButtonsContent,
    LocationContent,
    SendContentRequest,
    StickerContent,
    TemplateButtonContent,
    TemplateHeaderContent,
    TextContent,
    VideoContent,
)


def _compact(**values: Any) -> dict[str, Any]:
    return {name: value for name, value in values.items() if value is not None}


class _EnvelopeMixin:
    """Campos de envelope compartilhados por sessão e template."""

    def sender(self, value: str) -> Any:
        return self._set("from_", value)

    def to(self, value: str) -> Any:
        return self._set("to", value)

    def message_id(self, value: str) -> Any:
        return self._set("message_id", value)

    def callback_data(self, value: str) -> Any:
        return self._set("callback_data", value)

    def notify_url(self, value: str) -> Any:
        return self._set("notify_url", value)


class WhatsAppMessageBuilder(_EnvelopeMixin, ModelBuilder[SendContentRequest[Any]]):
    """Mensagem de sessão (texto, mídia, localização, contato ou interativa).

    O tipo do conteúdo define o modelo construído; o último setter de
    conteúdo chamado prevalece.
    """

    model = SendContentRequest
    required_fields = ("from_", "to", "content")

    def __init__(self) -> None:
        super().__init__()
        self._content_type: type[WireModel] | None = None

    def text(self, text: str, preview_url: bool | None = None) -> WhatsAppMessageBuilder:
        return self._content(TextContent, _compact(text=text, preview_url=preview_url))

    def document(
        self,
        media_url: str,
        caption: str | None = None,
        filename: str | None = None,
    ) -> WhatsAppMessageBuilder:
        return self._content(
            DocumentContent,
            _compact(media_url=media_url, caption=caption, filename=filename),
        )

    def image(self, media_url: str, caption: str | None = None) -> WhatsAppMessageBuilder:
        return self._content(ImageContent, _compact(media_url=media_url, caption=caption))

    def audio(self, media_url: str) -> WhatsAppMessageBuilder:
        return self._content(AudioContent, {"media_url": media_url})

    def video(self, media_url: str, caption: str | None = None) -> WhatsAppMessageBuilder:
        return self._content(VideoContent, _compact(media_url=media_url, caption=caption))

    def sticker(self, media_url: str) -> WhatsAppMessageBuilder:
        return self._content(StickerContent, {"media_url": media_url})

    def location(
        self,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> WhatsAppMessageBuilder:
        return self._content(
            LocationContent,
            _compact(latitude=latitude, longitude=longitude, name=name, address=address),
        )

    def contacts(self, contacts: Iterable[Contact | dict[str, Any]]) -> WhatsAppMessageBuilder:
        return self._content(ContactContent, {"contacts": tuple(contacts)})

    def interactive_buttons(
        self,
        body: str,
        buttons: Iterable[tuple[str, str]],
        footer: str | None = None,
    ) -> WhatsAppMessageBuilder:
        """Botões de resposta rápida; cada botão é um par (id, título)."""
        content: dict[str, Any] = {
            "body": {"text": body},
            "action": {
                "buttons": tuple({"id": id_, "title": title} for id_, title in buttons)
            },
        }
        if footer is not None:
            content["footer"] = {"text": footer}
        return self._content(InteractiveButtonsContent, content)

    def content(self, content: WireModel) -> WhatsAppMessageBuilder:
        """Define um conteúdo já construído."""
        return self._content(type(content), content)

    def _content(
        self,
        content_type: type[WireModel],
        value: WireModel | dict[str, Any],
    ) -> WhatsAppMessageBuilder:
        self._content_type = content_type
        return self._set("content", value)

    def _model_type(self) -> type[WireModel]:
        return SendContentRequest[self._content_type]  # type: ignore[name-defined]


class TemplateMessageBuilder(_EnvelopeMixin, ModelBuilder[FailoverMessage]):
    """Mensagem de template, com failover opcional para SMS.

    Exemplo:
        message = (
            TemplateMessageBuilder()
            .sender("441134960000")
            .to("441134960001")
            .template("welcome_multiple_languages", language="en")
            .placeholders(["Ana"])
            .build()
        )
    """

    model = FailoverMessage
    required_fields = ("from_", "to", "template_name", "language")

    def template(self, name: str, language: str) -> TemplateMessageBuilder:
        self._set("template_name", name)
        return self._set("language", language)

    def placeholders(self, values: Iterable[str]) -> TemplateMessageBuilder:
        return self._set("placeholders", tuple(values))

    def header(self, header: TemplateHeaderContent) -> TemplateMessageBuilder:
        return self._set("header", header)

    def buttons(self, buttons: Iterable[TemplateButtonContent]) -> TemplateMessageBuilder:
        return self._set("buttons", tuple(buttons))

    def sms_failover(self, sender: str, text: str) -> TemplateMessageBuilder:
        return self._set("sms_failover", {"from_": sender, "text": text})

    def _payload(self) -> dict[str, Any]:
        payload = super()._payload()
        template_data = _compact(
            body={"placeholders": payload.pop("placeholders", ())},
            header=payload.pop("header", None),
            buttons=payload.pop("buttons", None),
        )
        payload["content"] = {
            "template_name": payload.pop("template_name"),
            "template_data": template_data,
            "language": payload.pop("language"),
        }
        return payload
