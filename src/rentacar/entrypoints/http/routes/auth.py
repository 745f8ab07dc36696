from fastapi import APIRouter, Depends, status

from rentacar.entrypoints.http.dependencies import (
    get_authenticate_user_use_case,
    get_register_user_use_case,
)
from rentacar.entrypoints.http.dtos.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from rentacar.entrypoints.http.error_responses import ErrorResponse
from rentacar.entrypoints.http.mappers.auth_mapper import AuthMapper
from rentacar.use_cases.authenticate_user import AuthenticateUser
from rentacar.use_cases.register_user import RegisterUser

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=UserResponseDTO,
    summary="Log in with email and password",
    responses={
        401: {"model": ErrorResponse, "description": "Incorrect password"},
        403: {"model": ErrorResponse, "description": "Account is inactive"},
        404: {"model": ErrorResponse, "description": "No account uses the email"},
    },
)
def login(
    payload: LoginRequestDTO,
    use_case: AuthenticateUser = Depends(get_authenticate_user_use_case),
) -> UserResponseDTO:
    user = use_case.execute(AuthMapper.to_login_request(payload))
    return AuthMapper.to_user_response(user)


@router.post(
    "/register",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a renter account",
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
def register(
    payload: RegisterRequestDTO,
    use_case: RegisterUser = Depends(get_register_user_use_case),
) -> UserResponseDTO:
    user = use_case.execute(AuthMapper.to_registration_request(payload))
    return AuthMapper.to_user_response(user)
