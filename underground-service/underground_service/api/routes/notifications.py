"""
Notification routes
"""
from fastapi import APIRouter, Depends, status

from ...domain.models import Page
from ...infrastructure.state import ViewerState, get_viewer_state
from ...schemas import NotificationResponse, NotificationStateResponse
from ..dependencies import get_viewer_id


router = APIRouter(prefix="/api/v1/notifications", tags=["Notifications"])


@router.get("/{page}", response_model=NotificationStateResponse)
async def get_notification(
    page: Page,
    viewer_id: str = Depends(get_viewer_id),
    state: ViewerState = Depends(get_viewer_state)
):
    """Currently visible notification for a page, if any"""
    notifier = state.peek_notifier(viewer_id, page)
    current = notifier.current() if notifier else None
    if current is None:
        return NotificationStateResponse(page=page.value, visible=False)

    return NotificationStateResponse(
        page=page.value,
        visible=True,
        notification=NotificationResponse(
            message=current.message,
            kind=current.kind,
            expires_in_ms=notifier.remaining_ms(),
        ),
    )


@router.delete("/{page}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_notification(
    page: Page,
    viewer_id: str = Depends(get_viewer_id),
    state: ViewerState = Depends(get_viewer_state)
):
    """Hide the page's notification now"""
    notifier = state.peek_notifier(viewer_id, page)
    if notifier:
        notifier.dismiss()
