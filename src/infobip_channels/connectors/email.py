"""Cliente do canal Email."""

from __future__ import annotations

from infobip_channels.builders.payload import to_email_form, to_payload, to_query
from infobip_channels.connectors.channel import ChannelClient
from infobip_channels.models.common import (
    ApiResponse,
    RescheduleRequest,
    ScheduledQuery,
    ScheduledStatusResponse,
    UpdateScheduledStatusRequest,
)
from infobip_channels.models.email import (
    EmailBulksResponse,
    EmailBulksStatusResponse,
    EmailDeliveryReportsQuery,
    EmailDeliveryReportsResponse,
    EmailLogsQuery,
    EmailLogsResponse,
    EmailRescheduleResponse,
    SendEmailRequest,
    SendEmailResponse,
    ValidateAddressRequest,
    ValidateAddressResponse,
)

PATH_SEND = "/email/3/send"
PATH_DELIVERY_REPORTS = "/email/1/reports"
PATH_LOGS = "/email/1/logs"
PATH_VALIDATE_ADDRESS = "/email/2/validation"
PATH_BULKS = "/email/1/bulks"
PATH_BULKS_STATUS = "/email/1/bulks/status"


class EmailClient(ChannelClient):
    """Envio, bulks agendados, relatórios e validação de endereços."""

    async def send(self, request: SendEmailRequest) -> ApiResponse[SendEmailResponse]:
        """Envia email como multipart/form-data.

        Arquivos de anexo e imagem inline são lidos só depois da validação.

        Raises:
            ValidationError: Payload inválido (nenhuma chamada é feita)
            BuildError: Anexo ou imagem inline ilegível
            ApiRequestError: Resposta não-2xx
            TransportError: Falha de rede ou resposta inválida
        """
        self.check(request)
        return await self.http.post_form(PATH_SEND, to_email_form(request), SendEmailResponse)

    async def get_bulks(self, query: ScheduledQuery) -> ApiResponse[EmailBulksResponse]:
        """Lista os envios agendados de um bulk."""
        self.check(query)
        return await self.http.get(PATH_BULKS, EmailBulksResponse, to_query(query))

    async def reschedule(
        self,
        query: ScheduledQuery,
        request: RescheduleRequest,
    ) -> ApiResponse[EmailRescheduleResponse]:
        self.check(query, request)
        return await self.http.put_json(
            PATH_BULKS, to_payload(request), EmailRescheduleResponse, params=to_query(query)
        )

    async def get_scheduled_status(
        self,
        query: ScheduledQuery,
    ) -> ApiResponse[EmailBulksStatusResponse]:
        self.check(query)
        return await self.http.get(PATH_BULKS_STATUS, EmailBulksStatusResponse, to_query(query))

    async def update_scheduled_status(
        self,
        query: ScheduledQuery,
        request: UpdateScheduledStatusRequest,
    ) -> ApiResponse[ScheduledStatusResponse]:
        """Pausa, retoma ou cancela um bulk de email agendado."""
        self.check(query, request)
        return await self.http.put_json(
            PATH_BULKS_STATUS,
            to_payload(request),
            ScheduledStatusResponse,
            params=to_query(query),
        )

    async def delivery_reports(
        self,
        query: EmailDeliveryReportsQuery | None = None,
    ) -> ApiResponse[EmailDeliveryReportsResponse]:
        query = query or EmailDeliveryReportsQuery()
        self.check(query)
        return await self.http.get(
            PATH_DELIVERY_REPORTS, EmailDeliveryReportsResponse, to_query(query)
        )

    async def logs(self, query: EmailLogsQuery | None = None) -> ApiResponse[EmailLogsResponse]:
        query = query or EmailLogsQuery()
        self.check(query)
        return await self.http.get(PATH_LOGS, EmailLogsResponse, to_query(query))

    async def validate_address(
        self,
        request: ValidateAddressRequest,
    ) -> ApiResponse[ValidateAddressResponse]:
        """Verifica sintaxe e existência da caixa postal."""
        self.check(request)
        return await self.http.post_json(
            PATH_VALIDATE_ADDRESS, to_payload(request), ValidateAddressResponse
        )
