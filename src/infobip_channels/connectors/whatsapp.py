"""Cliente do canal WhatsApp."""

from __future__ import annotations

from typing import Any

from infobip_channels.builders.payload import to_payload
from infobip_channels.connectors.channel import ChannelClient
from infobip_channels.models.common import ApiResponse, WireModel
from infobip_channels.models.whatsapp import (
    AudioContent,
    ContactContent,
    DocumentContent,
    ImageContent,
    InteractiveButtonsContent,
    InteractiveListContent,
    InteractiveMultiproductContent,
    InteractiveProductContent,
    LocationContent,
    SendAudioRequest,
    SendContactRequest,
    SendContentRequest,
    SendContentResponse,
    SendDocumentRequest,
    SendImageRequest,
    SendInteractiveButtonsRequest,
    SendInteractiveListRequest,
    SendInteractiveMultiproductRequest,
    SendInteractiveProductRequest,
    SendLocationRequest,
    SendStickerRequest,
    SendTemplateRequest,
    SendTemplateResponse,
    SendTextRequest,
    SendVideoRequest,
    StickerContent,
    TextContent,
    VideoContent,
)

PATH_MESSAGE = "/whatsapp/1/message"
PATH_TEMPLATE = f"{PATH_MESSAGE}/template"
PATH_INTERACTIVE = f"{PATH_MESSAGE}/interactive"

# Tipo de conteúdo -> endpoint de envio
CONTENT_PATHS: dict[type[WireModel], str] = {
    TextContent: f"{PATH_MESSAGE}/text",
    DocumentContent: f"{PATH_MESSAGE}/document",
    ImageContent: f"{PATH_MESSAGE}/image",
    AudioContent: f"{PATH_MESSAGE}/audio",
    VideoContent: f"{PATH_MESSAGE}/video",
    StickerContent: f"{PATH_MESSAGE}/sticker",
    LocationContent: f"{PATH_MESSAGE}/location",
    ContactContent: f"{PATH_MESSAGE}/contact",
    InteractiveButtonsContent: f"{PATH_INTERACTIVE}/buttons",
    InteractiveListContent: f"{PATH_INTERACTIVE}/list",
    InteractiveProductContent: f"{PATH_INTERACTIVE}/product",
    InteractiveMultiproductContent: f"{PATH_INTERACTIVE}/multi-product",
}


class WhatsAppClient(ChannelClient):
    """Mensagens de sessão e de template."""

    async def send(
        self,
        request: SendContentRequest[Any],
    ) -> ApiResponse[SendContentResponse]:
        """Envia mensagem de sessão no endpoint do tipo de conteúdo.

        Raises:
            ValueError: Tipo de conteúdo sem endpoint
            ValidationError: Payload inválido (nenhuma chamada é feita)
            ApiRequestError: Resposta não-2xx
            TransportError: Falha de rede ou resposta inválida
        """
        path = CONTENT_PATHS.get(type(request.content))
        if path is None:
            raise ValueError(f"Tipo de conteúdo não suportado: {type(request.content).__name__}")
        self.check(request)
        return await self.http.post_json(path, to_payload(request), SendContentResponse)

    async def send_text(self, request: SendTextRequest) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_document(
        self,
        request: SendDocumentRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_image(self, request: SendImageRequest) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_audio(self, request: SendAudioRequest) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_video(self, request: SendVideoRequest) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_sticker(
        self,
        request: SendStickerRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_location(
        self,
        request: SendLocationRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_contact(
        self,
        request: SendContactRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_interactive_buttons(
        self,
        request: SendInteractiveButtonsRequest,
    ) -> ApiResponse[SendContentResponse]:
        """Mensagem com até 3 botões de resposta rápida."""
        return await self.send(request)

    async def send_interactive_list(
        self,
        request: SendInteractiveListRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_interactive_product(
        self,
        request: SendInteractiveProductRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_interactive_multiproduct(
        self,
        request: SendInteractiveMultiproductRequest,
    ) -> ApiResponse[SendContentResponse]:
        return await self.send(request)

    async def send_template(
        self,
        request: SendTemplateRequest,
    ) -> ApiResponse[SendTemplateResponse]:
        """Envia 1..N mensagens de template (com failover SMS opcional)."""
        self.check(request)
        return await self.http.post_json(PATH_TEMPLATE, to_payload(request), SendTemplateResponse)
