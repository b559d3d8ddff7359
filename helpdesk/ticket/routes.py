# helpdesk/ticket/routes.py
import structlog
from fastapi import APIRouter, Depends

from helpdesk.comment.repository import CommentRepository, get_comment_repository
from helpdesk.comment.schemas import CommentCreate, CommentOut
from helpdesk.core.database import parse_object_id
from helpdesk.core.errors import ApiError, HelpdeskError, InvalidIdentifier
from helpdesk.ticket.repository import TicketRepository, get_ticket_repository
from helpdesk.ticket.schemas import TicketCreate, TicketDetail, TicketOut, TicketUpdate

logger = structlog.get_logger()

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])

INVALID_ID = "Invalid ticket id"
NOT_FOUND = "Ticket not found"


def checked_id(ticket_id: str) -> str:
    try:
        parse_object_id(ticket_id)
    except InvalidIdentifier as e:
        raise ApiError(400, INVALID_ID, e) from e
    return ticket_id


def server_error(error: HelpdeskError, message: str, **context) -> ApiError:
    logger.error(message, error=error.message, kind=type(error).__name__, **context)
    return ApiError.from_error(error, message)


@router.post("", response_model=TicketOut, status_code=201)
def create(payload: TicketCreate, tickets: TicketRepository = Depends(get_ticket_repository)):
    try:
        return tickets.create(payload.model_dump(by_alias=True, exclude_none=True))
    except HelpdeskError as e:
        raise server_error(e, "Error creating ticket") from e


@router.get("", response_model=list[TicketOut])
def list_all(tickets: TicketRepository = Depends(get_ticket_repository)):
    try:
        return tickets.list_all()
    except HelpdeskError as e:
        raise server_error(e, "Error fetching tickets") from e


@router.get("/{ticket_id}", response_model=TicketDetail)
def get(
    ticket_id: str,
    tickets: TicketRepository = Depends(get_ticket_repository),
    comments: CommentRepository = Depends(get_comment_repository),
):
    checked_id(ticket_id)
    try:
        ticket = tickets.get_by_id(ticket_id)
        if not ticket:
            raise ApiError(404, NOT_FOUND)
        return {"ticket": ticket, "comments": comments.list_by_ticket(ticket.id)}
    except HelpdeskError as e:
        raise server_error(e, "Server error", ticket_id=ticket_id) from e


@router.put("/{ticket_id}", response_model=TicketOut)
def update(
    ticket_id: str,
    payload: TicketUpdate,
    tickets: TicketRepository = Depends(get_ticket_repository),
):
    checked_id(ticket_id)
    try:
        updated = tickets.update_by_id(
            ticket_id, payload.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        )
    except HelpdeskError as e:
        raise server_error(e, "Error updating ticket", ticket_id=ticket_id) from e
    if not updated:
        raise ApiError(404, NOT_FOUND)
    return updated


@router.get("/{ticket_id}/comments", response_model=list[CommentOut])
def list_comments(
    ticket_id: str,
    tickets: TicketRepository = Depends(get_ticket_repository),
    comments: CommentRepository = Depends(get_comment_repository),
):
    checked_id(ticket_id)
    try:
        if not tickets.get_by_id(ticket_id):
            raise ApiError(404, NOT_FOUND)
        return comments.list_by_ticket(ticket_id)
    except HelpdeskError as e:
        raise server_error(e, "Error fetching comments", ticket_id=ticket_id) from e


@router.post("/{ticket_id}/comments", response_model=CommentOut, status_code=201)
def add_comment(
    ticket_id: str,
    payload: CommentCreate,
    tickets: TicketRepository = Depends(get_ticket_repository),
    comments: CommentRepository = Depends(get_comment_repository),
):
    checked_id(ticket_id)
    try:
        if not tickets.get_by_id(ticket_id):
            raise ApiError(404, NOT_FOUND)
        return comments.create(ticket_id, payload.body, payload.author)
    except HelpdeskError as e:
        raise server_error(e, "Error adding comment", ticket_id=ticket_id) from e
