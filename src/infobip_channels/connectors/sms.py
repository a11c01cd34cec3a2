"""Cliente do canal SMS."""

from __future__ import annotations

from infobip_channels.builders.payload import to_payload, to_query
from infobip_channels.connectors.channel import ChannelClient
from infobip_channels.models.common import ApiResponse
from infobip_channels.models.sms import (
    DeliveryReportsQuery,
    DeliveryReportsResponse,
    InboundReportsQuery,
    InboundReportsResponse,
    LogsQuery,
    LogsResponse,
    PreviewRequest,
    PreviewResponse,
    RescheduleRequest,
    ScheduledQuery,
    ScheduledResponse,
    ScheduledStatusResponse,
    SendBinaryRequest,
    SendQueryParameters,
    SendRequest,
    SendResponse,
    UpdateScheduledStatusRequest,
)
from infobip_channels.validators import find_duplicate_message_ids

PATH_SEND_TEXT = "/sms/2/text/advanced"
PATH_SEND_BINARY = "/sms/2/binary/advanced"
PATH_SEND_QUERY = "/sms/1/text/query"
PATH_PREVIEW = "/sms/1/preview"
PATH_DELIVERY_REPORTS = "/sms/1/reports"
PATH_LOGS = "/sms/1/logs"
PATH_INBOUND_REPORTS = "/sms/1/inbox/reports"
PATH_SCHEDULED = "/sms/1/bulks"
PATH_SCHEDULED_STATUS = "/sms/1/bulks/status"


class SmsClient(ChannelClient):
    """Envio e consulta de SMS.

    Exemplo:
        client = SmsClient(settings=InfobipSettings(api_key="...", base_url="..."))
        response = await client.send(request)
        response.body.bulk_id
    """

    async def send(self, request: SendRequest) -> ApiResponse[SendResponse]:
        """Envia 1..N mensagens de texto.

        Raises:
            ValidationError: Payload inválido (nenhuma chamada é feita)
            ApiRequestError: Resposta não-2xx
            TransportError: Falha de rede ou resposta inválida
        """
        self.check(request)
        find_duplicate_message_ids(request.messages)
        return await self.http.post_json(PATH_SEND_TEXT, to_payload(request), SendResponse)

    async def send_binary(self, request: SendBinaryRequest) -> ApiResponse[SendResponse]:
        self.check(request)
        find_duplicate_message_ids(request.messages)
        return await self.http.post_json(PATH_SEND_BINARY, to_payload(request), SendResponse)

    async def send_over_query(self, query: SendQueryParameters) -> ApiResponse[SendResponse]:
        """Envia um SMS com todos os parâmetros na query string.

        Autentica por ``username``/``password`` da própria query; use só
        quando ``send`` não for opção.
        """
        self.check(query)
        return await self.http.get(PATH_SEND_QUERY, SendResponse, to_query(query))

    async def preview(self, request: PreviewRequest) -> ApiResponse[PreviewResponse]:
        """Pré-visualiza contagem de partes e caracteres restantes."""
        self.check(request)
        return await self.http.post_json(PATH_PREVIEW, to_payload(request), PreviewResponse)

    async def delivery_reports(
        self,
        query: DeliveryReportsQuery | None = None,
    ) -> ApiResponse[DeliveryReportsResponse]:
        """Relatórios de entrega ainda não consumidos (cada um é entregue uma vez)."""
        query = query or DeliveryReportsQuery()
        self.check(query)
        return await self.http.get(PATH_DELIVERY_REPORTS, DeliveryReportsResponse, to_query(query))

    async def logs(self, query: LogsQuery | None = None) -> ApiResponse[LogsResponse]:
        query = query or LogsQuery()
        self.check(query)
        return await self.http.get(PATH_LOGS, LogsResponse, to_query(query))

    async def inbound_reports(
        self,
        query: InboundReportsQuery | None = None,
    ) -> ApiResponse[InboundReportsResponse]:
        query = query or InboundReportsQuery()
        self.check(query)
        return await self.http.get(PATH_INBOUND_REPORTS, InboundReportsResponse, to_query(query))

    async def get_scheduled(self, query: ScheduledQuery) -> ApiResponse[ScheduledResponse]:
        self.check(query)
        return await self.http.get(PATH_SCHEDULED, ScheduledResponse, to_query(query))

    async def reschedule(
        self,
        query: ScheduledQuery,
        request: RescheduleRequest,
    ) -> ApiResponse[ScheduledResponse]:
        self.check(query, request)
        return await self.http.put_json(
            PATH_SCHEDULED, to_payload(request), ScheduledResponse, params=to_query(query)
        )

    async def get_scheduled_status(
        self,
        query: ScheduledQuery,
    ) -> ApiResponse[ScheduledStatusResponse]:
        self.check(query)
        return await self.http.get(PATH_SCHEDULED_STATUS, ScheduledStatusResponse, to_query(query))

    async def update_scheduled_status(
        self,
        query: ScheduledQuery,
        request: UpdateScheduledStatusRequest,
    ) -> ApiResponse[ScheduledStatusResponse]:
        """Pausa, retoma ou cancela um bulk agendado."""
        self.check(query, request)
        return await self.http.put_json(
            PATH_SCHEDULED_STATUS,
            to_payload(request),
            ScheduledStatusResponse,
            params=to_query(query),
        )
