# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, request
from pydantic import ValidationError

from creative_hub.application.use_cases.users.login_user import LoginUserUseCase
from creative_hub.application.use_cases.users.register_user import \
    RegisterUserUseCase
from creative_hub.domain.users.exceptions import InvalidCredentialsError
from creative_hub.infrastructure.audit import AuditAction, audit_log
from creative_hub.interfaces.http.dto.auth import (LoginRequestDTO,
                                                   RegisterRequestDTO, TokenDTO)
from creative_hub.interfaces.http.dto.envelope import MessageDTO, success
from creative_hub.shared.errors.validation import raise_validation_error
from creative_hub.shared.logging import logger
from creative_hub.shared.middleware.rate_limit import client_key


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.email, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_key(request),
            details={"email": dto.email},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return success(MessageDTO(message="User registered successfully."))

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_key(request)

        try:
            token = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"email": dto.email},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=token.user_id,
            ip_address=ip_address,
            details={"email": dto.email},
            success=True,
        )
        logger.info(f"auth.login: ok user_id={token.user_id}")
        return success(
            TokenDTO(token=token.token, expires_at=token.expires_at.isoformat())
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
