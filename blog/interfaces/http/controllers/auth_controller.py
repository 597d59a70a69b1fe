# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from flask import Blueprint, Response, jsonify, request

from blog.application.use_cases.users.login_user import LoginUserUseCase
from blog.application.use_cases.users.logout_user import LogoutUserUseCase
from blog.application.use_cases.users.register_user import RegisterUserUseCase
from blog.domain.users.entities import User
from blog.infrastructure.auth import auth_required, current_identity
from blog.interfaces.http.dto.auth import (LoginRequestDTO, ProfileDTO,
                                           RegisterRequestDTO, UserDTO)
from blog.shared.config.settings import SecurityConfig
from blog.shared.errors.validation import validate_payload
from blog.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        security: SecurityConfig,
        cookie_name: str = "token",
        session_ttl: timedelta = timedelta(days=7),
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._security = security
        self._cookie_name = cookie_name
        self._session_ttl = session_ttl

    def _session_response(self, user: User, token: str) -> Response:
        response = jsonify(UserDTO(id=user.id, username=user.username).model_dump(by_alias=True))
        response.set_cookie(
            self._cookie_name,
            token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=int(self._session_ttl.total_seconds()),
        )
        return response

    def register(self) -> tuple[Response, int]:
        dto = validate_payload(RegisterRequestDTO, request.get_json(silent=True) or {})

        user, token = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok user_id={user.id} ip={_get_client_ip()}")
        return self._session_response(user, token), 200

    def login(self) -> tuple[Response, int]:
        dto = validate_payload(LoginRequestDTO, request.get_json(silent=True) or {})

        try:
            user, token = self._login_use_case.execute(dto.username, dto.password)
        except Exception as exc:
            logger.warning(
                f"auth.login: failed username={dto.username} ip={_get_client_ip()} "
                f"reason={getattr(exc, 'code', type(exc).__name__)}"
            )
            raise

        logger.info(f"auth.login: ok user_id={user.id} ip={_get_client_ip()}")
        return self._session_response(user, token), 200

    @auth_required
    def profile(self) -> tuple[Response, int]:
        claim = current_identity()
        payload = ProfileDTO(
            user_id=claim.user_id,
            username=claim.username,
            iat=int(claim.issued_at.timestamp()) if claim.issued_at else None,
            exp=int(claim.expires_at.timestamp()) if claim.expires_at else None,
        )
        return jsonify(payload.model_dump(by_alias=True, exclude_none=True)), 200

    def logout(self) -> tuple[Response, int]:
        claim = self._logout_use_case.execute(request.cookies.get(self._cookie_name))

        response = jsonify("ok")
        response.set_cookie(
            self._cookie_name,
            "",
            expires=0,
            max_age=0,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info(f"auth.logout: ok user_id={claim.user_id if claim else None}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/profile", view_func=self.profile, methods=["GET"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
