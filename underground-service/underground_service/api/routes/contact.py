"""
Contact form routes
"""
from fastapi import APIRouter, Depends

from ...application.services import ContactService
from ...schemas import ContactRequest, MessageResponse
from ..dependencies import get_contact_service, get_viewer_id


router = APIRouter(prefix="/api/v1/contact", tags=["Contact"], dependencies=[Depends(get_viewer_id)])


@router.post("", response_model=MessageResponse)
async def submit_contact(
    form: ContactRequest,
    contact_service: ContactService = Depends(get_contact_service)
):
    """
    Relay a contact form submission

    - **name**: Sender name
    - **email**: Sender email address
    - **subject**: Message subject
    - **message**: Message body

    Relay failures are reported in the body with success=false.
    """
    success, message = await contact_service.submit(
        name=form.name,
        email=form.email,
        subject=form.subject,
        message=form.message
    )
    return MessageResponse(message=message, success=success)
