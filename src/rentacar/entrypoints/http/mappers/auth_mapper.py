from __future__ import annotations

from rentacar.domain.user import User
from rentacar.entrypoints.http.dtos.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from rentacar.use_cases.authenticate_user import LoginRequest
from rentacar.use_cases.register_user import RegistrationRequest


class AuthMapper:
    """Maps between REST DTOs and domain models for login and registration."""

    @staticmethod
    def to_login_request(dto: LoginRequestDTO) -> LoginRequest:
        return LoginRequest(email=dto.email, password=dto.password)

    @staticmethod
    def to_registration_request(dto: RegisterRequestDTO) -> RegistrationRequest:
        return RegistrationRequest(
            email=dto.email,
            password=dto.password,
            name=dto.name,
            phone=dto.phone,
        )

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        return UserResponseDTO(
            id=user.id,
            email=user.email,
            name=user.name,
            phone=user.phone,
            role=user.role.value,
            is_active=user.is_active,
            avatar=user.avatar,
            created_at=user.created_at,
        )
