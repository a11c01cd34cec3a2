"""Builder do canal Email."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from infobip_channels.builders.base import ModelBuilder
from infobip_channels.models.email import SendEmailRequest


class SendEmailBuilder(ModelBuilder[SendEmailRequest]):
    """Email com conteúdo próprio (text/html/ampHtml) ou template.

    Exemplo:
        email = (
            SendEmailBuilder()
            .sender("Jane Smith <jane.smith@somecompany.com>")
            .to("john.smith@somedomain.com")
            .subject("Mail subject text")
            .text("Mail body text")
            .build()
        )
    """

    model = SendEmailRequest
    required_fields = ("to",)

    def sender(self, value: str) -> SendEmailBuilder:
        return self._set("from_", value)

    def to(self, value: str) -> SendEmailBuilder:
        return self._set("to", value)

    def cc(self, addresses: str | Iterable[str]) -> SendEmailBuilder:
        return self._set("cc", _join_addresses(addresses))

    def bcc(self, addresses: str | Iterable[str]) -> SendEmailBuilder:
        return self._set("bcc", _join_addresses(addresses))

    def reply_to(self, value: str) -> SendEmailBuilder:
        return self._set("reply_to", value)

    def subject(self, value: str) -> SendEmailBuilder:
        return self._set("subject", value)

    def text(self, value: str) -> SendEmailBuilder:
        return self._set("text", value)

    def html(self, value: str) -> SendEmailBuilder:
        return self._set("html", value)

    def amp_html(self, value: str) -> SendEmailBuilder:
        return self._set("amp_html", value)

    def template_id(self, value: int) -> SendEmailBuilder:
        return self._set("template_id", value)

    def attachment(self, path: str | PathLike[str]) -> SendEmailBuilder:
        """Arquivo anexado; lido apenas no envio."""
        return self._set("attachment", str(path))

    def inline_image(self, path: str | PathLike[str]) -> SendEmailBuilder:
        return self._set("inline_image", str(path))

    def intermediate_report(self, value: bool = True) -> SendEmailBuilder:
        return self._set("intermediate_report", value)

    def notify_url(self, value: str) -> SendEmailBuilder:
        return self._set("notify_url", value)

    def notify_content_type(self, value: str) -> SendEmailBuilder:
        return self._set("notify_content_type", value)

    def callback_data(self, value: str) -> SendEmailBuilder:
        return self._set("callback_data", value)

    def tracking(
        self,
        track: bool | None = None,
        clicks: bool | None = None,
        opens: bool | None = None,
        url: str | None = None,
    ) -> SendEmailBuilder:
        self._set("track", track)
        self._set("track_clicks", clicks)
        self._set("track_opens", opens)
        return self._set("tracking_url", url)

    def bulk_id(self, value: str) -> SendEmailBuilder:
        return self._set("bulk_id", value)

    def message_id(self, value: str) -> SendEmailBuilder:
        return self._set("message_id", value)

    def default_placeholders(self, value: str) -> SendEmailBuilder:
        return self._set("default_placeholders", value)

    def preserve_recipients(self, value: bool = True) -> SendEmailBuilder:
        return self._set("preserve_recipients", value)

    def send_at(self, value: str) -> SendEmailBuilder:
        return self._set("send_at", value)

    def landing_page(
        self,
        page_id: str,
        placeholders: str | None = None,
    ) -> SendEmailBuilder:
        self._set("landing_page_id", page_id)
        return self._set("landing_page_placeholders", placeholders)


def _join_addresses(addresses: str | Iterable[str]) -> str:
    if isinstance(addresses, str):
        return addresses
    return ",".join(addresses)
