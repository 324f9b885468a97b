"""
Mock session routes - sign in/up/out and profile editing
"""
from fastapi import APIRouter, Depends, Query, status

from ...application.services import SessionService
from ...domain.models import Page, SignedIn
from ...schemas import (
    SignInRequest, SignUpRequest, SessionResponse,
    ProfileResponse, UpdateProfile
)
from ..dependencies import get_session_service


router = APIRouter(prefix="/api/v1/session", tags=["Session"])


@router.get("", response_model=SessionResponse)
async def load_session(
    page: Page = Query(Page.PROFILE, description="Page performing the auth check"),
    session_service: SessionService = Depends(get_session_service)
):
    """
    Current session

    A missing or unreadable stored profile reads as signed out.

    - **page**: The account page simulates a slower check
    """
    session = await session_service.load_session(page)
    if isinstance(session, SignedIn):
        return SessionResponse(
            signed_in=True,
            profile=ProfileResponse.model_validate(session.profile)
        )
    return SessionResponse(signed_in=False)


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    credentials: SignInRequest,
    session_service: SessionService = Depends(get_session_service)
):
    """
    Mock sign in

    - **email**: Valid email address
    - **password**: Any non-empty password, not checked
    """
    profile, notification = await session_service.sign_in(credentials.email)

    return SessionResponse(
        signed_in=True,
        profile=ProfileResponse.model_validate(profile),
        notification=notification
    )


@router.post("/sign-up", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    user_data: SignUpRequest,
    session_service: SessionService = Depends(get_session_service)
):
    """
    Mock sign up

    - **name**: Display name (1-100 characters)
    - **email**: Valid email address
    - **password**: Any non-empty password, not stored
    """
    profile, notification = await session_service.sign_up(user_data.name, user_data.email)

    return SessionResponse(
        signed_in=True,
        profile=ProfileResponse.model_validate(profile),
        notification=notification
    )


@router.delete("", response_model=SessionResponse)
async def sign_out(session_service: SessionService = Depends(get_session_service)):
    """Forget the stored profile"""
    await session_service.sign_out()
    return SessionResponse(signed_in=False)


@router.put("/profile", response_model=SessionResponse)
async def save_profile(
    profile_data: UpdateProfile,
    session_service: SessionService = Depends(get_session_service)
):
    """
    Update the signed-in viewer's profile

    Requires a stored session. Omitted fields are left unchanged.
    """
    profile, notification = await session_service.save_profile(profile_data.model_dump())

    return SessionResponse(
        signed_in=True,
        profile=ProfileResponse.model_validate(profile),
        notification=notification
    )
