"""Console resource (card templates and event logs) for the AccessGrid SDK."""
from __future__ import annotations

from typing import Any, List, Optional

from ..models.template import (
    CreateTemplateRequest,
    Event,
    EventLogFilter,
    Template,
    UpdateTemplateRequest,
)
from .base import (
    AsyncBaseResource,
    SyncBaseResource,
    TimeoutTypes,
    build_path,
    coerce_request,
    parse_list,
    parse_model,
)

TEMPLATES_PATH = "/v1/console/card-templates"
TEMPLATE_PATH = "/v1/console/card-templates/{}"
TEMPLATE_LOGS_PATH = "/v1/console/card-templates/{}/logs"


class AsyncConsoleResource(AsyncBaseResource):
    """Enterprise console operations (async)."""

    async def create_template(
        self,
        request: Optional[CreateTemplateRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Template:
        request = coerce_request(CreateTemplateRequest, request, fields)
        data = await self._post(TEMPLATES_PATH, request.to_dict(), timeout=timeout)
        return parse_model(Template, data)

    async def update_template(
        self,
        request: Optional[UpdateTemplateRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Template:
        request = coerce_request(UpdateTemplateRequest, request, fields)
        path = build_path(TEMPLATE_PATH, request.card_template_id)
        data = await self._put(path, request.to_dict(), timeout=timeout)
        return parse_model(Template, data)

    async def read_template(
        self,
        template_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Template:
        data = await self._get(build_path(TEMPLATE_PATH, template_id), timeout=timeout)
        return parse_model(Template, data)

    async def list_templates(self, timeout: Optional[TimeoutTypes] = None) -> List[Template]:
        data = await self._get(TEMPLATES_PATH, timeout=timeout)
        return parse_list(Template, data, "templates")

    async def delete_template(
        self,
        template_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> None:
        await self._delete(build_path(TEMPLATE_PATH, template_id), timeout=timeout)

    async def event_log(
        self,
        template_id: str,
        filter: Optional[EventLogFilter] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> List[Event]:
        """Fetch the event log of a template.

        Only the filters that are set are sent; dates go out as RFC3339.
        """
        filter = coerce_request(EventLogFilter, filter, fields)
        path = build_path(TEMPLATE_LOGS_PATH, template_id)
        data = await self._get(path, params=filter.to_params(), timeout=timeout)
        return parse_list(Event, data, "logs")


class ConsoleResource(SyncBaseResource):
    """Enterprise console operations."""

    def create_template(
        self,
        request: Optional[CreateTemplateRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Template:
        request = coerce_request(CreateTemplateRequest, request, fields)
        data = self._post(TEMPLATES_PATH, request.to_dict(), timeout=timeout)
        return parse_model(Template, data)

    def update_template(
        self,
        request: Optional[UpdateTemplateRequest] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> Template:
        request = coerce_request(UpdateTemplateRequest, request, fields)
        path = build_path(TEMPLATE_PATH, request.card_template_id)
        data = self._put(path, request.to_dict(), timeout=timeout)
        return parse_model(Template, data)

    def read_template(
        self,
        template_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Template:
        data = self._get(build_path(TEMPLATE_PATH, template_id), timeout=timeout)
        return parse_model(Template, data)

    def list_templates(self, timeout: Optional[TimeoutTypes] = None) -> List[Template]:
        data = self._get(TEMPLATES_PATH, timeout=timeout)
        return parse_list(Template, data, "templates")

    def delete_template(
        self,
        template_id: str,
        timeout: Optional[TimeoutTypes] = None,
    ) -> None:
        self._delete(build_path(TEMPLATE_PATH, template_id), timeout=timeout)

    def event_log(
        self,
        template_id: str,
        filter: Optional[EventLogFilter] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
        **fields: Any,
    ) -> List[Event]:
        """Fetch the event log of a template.

        Only the filters that are set are sent; dates go out as RFC3339.
        """
        filter = coerce_request(EventLogFilter, filter, fields)
        path = build_path(TEMPLATE_LOGS_PATH, template_id)
        data = self._get(path, params=filter.to_params(), timeout=timeout)
        return parse_list(Event, data, "logs")


__all__ = ["AsyncConsoleResource", "ConsoleResource"]
