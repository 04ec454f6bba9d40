# app/routers/maintenance_assets/work_order_router.py
from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import ensure_permission, require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate, UserToken
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...enum.maintenance_assets_enum import WorkOrderStatus
from ...schemas.maintenance_assets.work_order_schemas import (
    WorkOrderAssign, WorkOrderAttachmentCreate, WorkOrderAttachmentOut, WorkOrderCommentCreate, WorkOrderCommentOut,
    WorkOrderCreate, WorkOrderOut, WorkOrderRequest, WorkOrderStatistics, WorkOrderUpdate)
from ...services.maintenance_assets import work_order_service as service

router = APIRouter(
    prefix="/api/work-orders",
    tags=["work-orders"],
    dependencies=[Depends(require_permission("view work orders"))]
)


CLOSING_STATUSES = (WorkOrderStatus.completed.value, WorkOrderStatus.cancelled.value)


def _check_close_permission(current_user: UserToken, status):
    if status in CLOSING_STATUSES:
        ensure_permission(current_user, "close work orders")


def _work_order_list(work_orders, message: str):
    return success_response(data=[WorkOrderOut.model_validate(w) for w in work_orders], message=message)


@router.get("/", response_model=JsonOutResult[PaginatedResult[WorkOrderOut]])
def get_work_orders(params: WorkOrderRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_work_orders(db, params), message="Work orders retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[WorkOrderOut])
def create_work_order(
        work_order: WorkOrderCreate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("create work orders"))):
    result = service.create_work_order(db, work_order, current_user)
    return created_response(data=WorkOrderOut.model_validate(result), message="Work order created successfully")


@router.get("/statistics", response_model=JsonOutResult[WorkOrderStatistics])
def get_work_order_statistics(db: Session = Depends(get_db)):
    return success_response(
        data=service.get_work_order_statistics(db), message="Work order statistics retrieved successfully")


@router.get("/overdue", response_model=JsonOutResult[List[WorkOrderOut]])
def get_overdue_work_orders(db: Session = Depends(get_db)):
    return _work_order_list(service.get_overdue_work_orders(db), "Overdue work orders retrieved successfully")


@router.get("/due", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_due_within(days: int = Query(7, ge=1), db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_due_within(db, days), "Due work orders retrieved successfully")


@router.get("/date-range", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_by_date_range(
        start_date: date = Query(...),
        end_date: date = Query(...),
        db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_by_date_range(db, start_date, end_date),
                            "Work orders retrieved successfully")


@router.get("/asset/{asset_id}", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_by_asset(asset_id: UUID, db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_by_asset(db, asset_id), "Asset work orders retrieved successfully")


@router.get("/space/{space_id}", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_by_space(space_id: UUID, db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_by_space(db, space_id), "Space work orders retrieved successfully")


@router.get("/assignee/{user_id}", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_by_assignee(user_id: UUID, db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_by_assignee(db, user_id),
                            "Assigned work orders retrieved successfully")


@router.get("/requester/{user_id}", response_model=JsonOutResult[List[WorkOrderOut]])
def get_work_orders_by_requester(user_id: UUID, db: Session = Depends(get_db)):
    return _work_order_list(service.get_work_orders_by_requester(db, user_id),
                            "Requested work orders retrieved successfully")


@router.get("/{work_order_id}", response_model=JsonOutResult[WorkOrderOut])
def get_work_order(work_order_id: UUID, db: Session = Depends(get_db)):
    work_order = service.get_work_order(db, work_order_id)
    return success_response(data=WorkOrderOut.model_validate(work_order), message="Work order retrieved successfully")


@router.put("/{work_order_id}", response_model=JsonOutResult[WorkOrderOut])
def update_work_order(
        work_order_id: UUID,
        work_order: WorkOrderUpdate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("edit work orders"))):
    _check_close_permission(current_user, work_order.status)
    result = service.update_work_order(db, work_order_id, work_order)
    return success_response(data=WorkOrderOut.model_validate(result), message="Work order updated successfully")


@router.delete("/{work_order_id}", response_model=JsonOutResult[None])
def delete_work_order(
        work_order_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete work orders"))):
    service.delete_work_order(db, work_order_id)
    return deleted_response(message="Work order deleted successfully")


@router.patch("/{work_order_id}/status", response_model=JsonOutResult[WorkOrderOut])
def update_work_order_status(
        work_order_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("edit work orders"))):
    _check_close_permission(current_user, payload.status)
    result = service.update_work_order_status(db, work_order_id, payload.status)
    return success_response(data=WorkOrderOut.model_validate(result), message="Work order status updated successfully")


@router.patch("/{work_order_id}/assign", response_model=JsonOutResult[WorkOrderOut])
def assign_work_order(
        work_order_id: UUID,
        payload: WorkOrderAssign,
        db: Session = Depends(get_db),
        _=Depends(require_permission("assign work orders"))):
    result = service.assign_work_order(db, work_order_id, payload.assignee_id)
    return success_response(data=WorkOrderOut.model_validate(result), message="Work order assigned successfully")


# ---------------- Comments ----------------
@router.get("/{work_order_id}/comments", response_model=JsonOutResult[List[WorkOrderCommentOut]])
def get_comments(work_order_id: UUID, db: Session = Depends(get_db)):
    comments = service.get_comments(db, work_order_id)
    return success_response(
        data=[WorkOrderCommentOut.model_validate(c) for c in comments], message="Comments retrieved successfully")


@router.post("/{work_order_id}/comments", status_code=201, response_model=JsonOutResult[WorkOrderCommentOut])
def add_comment(
        work_order_id: UUID,
        comment: WorkOrderCommentCreate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("add work order comments"))):
    result = service.add_comment(db, work_order_id, comment, current_user)
    return created_response(data=WorkOrderCommentOut.model_validate(result), message="Comment added successfully")


@router.delete("/{work_order_id}/comments/{comment_id}", response_model=JsonOutResult[None])
def remove_comment(
        work_order_id: UUID,
        comment_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete work order comments"))):
    service.remove_comment(db, work_order_id, comment_id)
    return deleted_response(message="Comment deleted successfully")


# ---------------- Attachments ----------------
@router.get("/{work_order_id}/attachments", response_model=JsonOutResult[List[WorkOrderAttachmentOut]])
def get_attachments(work_order_id: UUID, db: Session = Depends(get_db)):
    attachments = service.get_attachments(db, work_order_id)
    return success_response(
        data=[WorkOrderAttachmentOut.model_validate(a) for a in attachments],
        message="Attachments retrieved successfully")


@router.post("/{work_order_id}/attachments", status_code=201, response_model=JsonOutResult[WorkOrderAttachmentOut])
def add_attachment(
        work_order_id: UUID,
        attachment: WorkOrderAttachmentCreate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("upload work order attachments"))):
    result = service.add_attachment(db, work_order_id, attachment, current_user)
    return created_response(data=WorkOrderAttachmentOut.model_validate(result), message="Attachment added successfully")


@router.delete("/{work_order_id}/attachments/{attachment_id}", response_model=JsonOutResult[None])
def remove_attachment(
        work_order_id: UUID,
        attachment_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete work order attachments"))):
    service.remove_attachment(db, work_order_id, attachment_id)
    return deleted_response(message="Attachment deleted successfully")
