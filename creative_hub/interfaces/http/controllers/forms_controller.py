# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, request
from pydantic import ValidationError

from creative_hub.application.use_cases.submissions.submit_contact import \
    SubmitContactUseCase
from creative_hub.application.use_cases.submissions.submit_service_request import \
    SubmitServiceRequestUseCase
from creative_hub.interfaces.http.dto.envelope import MessageDTO, success
from creative_hub.interfaces.http.dto.forms import ContactRequestDTO, ServiceRequestDTO
from creative_hub.shared.errors.validation import raise_validation_error
from creative_hub.shared.logging import logger


class FormsController:
    def __init__(
        self,
        *,
        contact_use_case: SubmitContactUseCase,
        service_request_use_case: SubmitServiceRequestUseCase,
    ) -> None:
        self._contact_use_case = contact_use_case
        self._service_request_use_case = service_request_use_case

    def contact(self) -> tuple[Response, int]:
        try:
            dto = ContactRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._contact_use_case.execute(dto.name, dto.email, dto.message)
        logger.info("forms.contact: ok")
        return success(MessageDTO(message="Contact form received."))

    def service_request(self) -> tuple[Response, int]:
        try:
            dto = ServiceRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._service_request_use_case.execute(
            dto.name, dto.email, dto.service, dto.details
        )
        logger.info(f"forms.request: ok service={dto.service}")
        return success(MessageDTO(message="Service request received."))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("forms", __name__, url_prefix="/api")
        bp.add_url_rule("/contact", view_func=self.contact, methods=["POST"])
        bp.add_url_rule("/request", view_func=self.service_request, methods=["POST"])
        return bp
