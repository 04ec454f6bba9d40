from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError, ValidationError
from shared.core.schemas import PaginatedResult, UserToken
from shared.helpers.date_helper import day_range, utc_now
from ...crud.maintenance_assets.assets_crud import asset_crud
from ...crud.maintenance_assets.work_order_attachment_crud import work_order_attachment_crud
from ...crud.maintenance_assets.work_order_comment_crud import work_order_comment_crud
from ...crud.maintenance_assets.work_order_crud import overdue_filters, work_order_crud
from ...crud.space_sites.spaces_crud import space_crud
from ...enum.maintenance_assets_enum import WorkOrderPriority, WorkOrderStatus, WorkOrderType
from ...models.maintenance_assets.work_order import WorkOrder
from ...schemas.maintenance_assets.work_order_schemas import (
    WorkOrderAttachmentCreate, WorkOrderCommentCreate, WorkOrderCreate, WorkOrderOut, WorkOrderRequest,
    WorkOrderStatistics, WorkOrderUpdate)
from ..base_service import (
    drop_nulls, ensure_reference, ensure_user, get_or_404, get_user_or_404, handle_errors, logger,
    percentage, validate_choice)


def generate_work_order_number(db: Session) -> str:
    """``WO-YYYYMMDD-NNNN`` with a per-day counter."""
    prefix = f"WO-{utc_now():%Y%m%d}-"
    counter = work_order_crud.count_numbers_with_prefix(db, prefix) + 1
    number = f"{prefix}{counter:04d}"
    while work_order_crud.exists_with(db, "number", number):
        counter += 1
        number = f"{prefix}{counter:04d}"
    return number


def _apply_status_stamps(db_work_order: WorkOrder, status: str):
    if status == WorkOrderStatus.completed.value:
        db_work_order.completed_at = utc_now()
    elif status == WorkOrderStatus.in_progress.value and not db_work_order.started_at:
        db_work_order.started_at = utc_now()


def get_work_orders(db: Session, params: WorkOrderRequest):
    with handle_errors(db, "retrieving work orders"):
        items, total = work_order_crud.paginate(
            db, params.page, params.per_page, work_order_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [WorkOrderOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_work_order(db: Session, work_order_id: UUID):
    with handle_errors(db, "retrieving work order"):
        return get_or_404(db, work_order_crud, work_order_id, "Work order")


def create_work_order(db: Session, work_order: WorkOrderCreate, current_user: UserToken):
    with handle_errors(db, "creating work order", commit=True):
        data = work_order.model_dump(exclude_unset=True)
        ensure_reference(db, asset_crud, "asset_id", data.get("asset_id"))
        ensure_reference(db, space_crud, "space_id", data.get("space_id"))
        data["requested_by"] = data.get("requested_by") or UUID(current_user.user_id)
        ensure_user(db, "requested_by", data["requested_by"])
        ensure_user(db, "assigned_to", data.get("assigned_to"))

        data["number"] = generate_work_order_number(db)
        data["status"] = data.get("status") or WorkOrderStatus.pending.value
        data["priority"] = data.get("priority") or WorkOrderPriority.medium.value
        data["type"] = data.get("type") or WorkOrderType.corrective.value

        db_work_order = work_order_crud.create(db, data)
        _apply_status_stamps(db_work_order, db_work_order.status)
        db.flush()
    logger.info("Work order %s created by %s", db_work_order.number, db_work_order.requested_by)
    return db_work_order


def update_work_order(db: Session, work_order_id: UUID, work_order: WorkOrderUpdate):
    with handle_errors(db, "updating work order", commit=True):
        db_work_order = get_or_404(db, work_order_crud, work_order_id, "Work order")
        data = drop_nulls(work_order.model_dump(exclude_unset=True),
                          "title", "description", "type", "priority", "status", "requested_by")
        if "asset_id" in data:
            ensure_reference(db, asset_crud, "asset_id", data["asset_id"])
        if "space_id" in data:
            ensure_reference(db, space_crud, "space_id", data["space_id"])
        if "requested_by" in data:
            ensure_user(db, "requested_by", data["requested_by"])
        if "assigned_to" in data:
            ensure_user(db, "assigned_to", data["assigned_to"])

        status_changed = "status" in data and data["status"] != db_work_order.status
        db_work_order = work_order_crud.update(db, work_order_id, data)
        if status_changed:
            _apply_status_stamps(db_work_order, db_work_order.status)
            db.flush()
        return db_work_order


def delete_work_order(db: Session, work_order_id: UUID):
    with handle_errors(db, "deleting work order", commit=True):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        return work_order_crud.delete(db, work_order_id)


def update_work_order_status(db: Session, work_order_id: UUID, status: str):
    with handle_errors(db, "updating work order status", commit=True):
        validate_choice(status, WorkOrderStatus)
        db_work_order = get_or_404(db, work_order_crud, work_order_id, "Work order")
        previous = db_work_order.status
        db_work_order.status = status
        _apply_status_stamps(db_work_order, status)
        db.flush()
    logger.info("Work order %s status changed from %s to %s", db_work_order.number, previous, status)
    return db_work_order


def assign_work_order(db: Session, work_order_id: UUID, assignee_id: UUID):
    with handle_errors(db, "assigning work order", commit=True):
        db_work_order = get_or_404(db, work_order_crud, work_order_id, "Work order")
        ensure_user(db, "assignee_id", assignee_id)
        db_work_order = work_order_crud.update(db, work_order_id, {
            "assigned_to": assignee_id,
            "status": WorkOrderStatus.assigned.value,
        })
    logger.info("Work order %s assigned to %s", db_work_order.number, assignee_id)
    return db_work_order


def get_work_order_statistics(db: Session) -> WorkOrderStatistics:
    with handle_errors(db, "retrieving work order statistics"):
        by_status = work_order_crud.count_grouped(db, WorkOrder.status)
        by_priority = work_order_crud.count_grouped(db, WorkOrder.priority)
        by_type = work_order_crud.count_grouped(db, WorkOrder.type)
        total = sum(by_status.values())
        completed = by_status.get(WorkOrderStatus.completed.value, 0)

        return WorkOrderStatistics(
            total=total,
            pending=by_status.get(WorkOrderStatus.pending.value, 0),
            in_progress=by_status.get(WorkOrderStatus.in_progress.value, 0),
            completed=completed,
            overdue=work_order_crud.count(db, *overdue_filters()),
            by_priority={item.value: by_priority.get(item.value, 0) for item in WorkOrderPriority},
            by_type={item.value: by_type.get(item.value, 0) for item in WorkOrderType},
            completion_rate=percentage(completed, total),
        )


def get_overdue_work_orders(db: Session):
    with handle_errors(db, "retrieving overdue work orders"):
        return work_order_crud.get_overdue(db)


def get_work_orders_due_within(db: Session, days: int = 7):
    with handle_errors(db, "retrieving due work orders"):
        return work_order_crud.get_due_within(db, days)


def get_work_orders_by_date_range(db: Session, start_date: date, end_date: date):
    with handle_errors(db, "retrieving work orders by date range"):
        if end_date < start_date:
            raise ValidationError.for_field(
                "end_date", "The end date must be a date after or equal to start date.")
        return work_order_crud.get_by_date_range(db, *day_range(start_date, end_date))


def get_work_orders_by_asset(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset work orders"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return work_order_crud.get_by_asset(db, asset_id)


def get_work_orders_by_space(db: Session, space_id: UUID):
    with handle_errors(db, "retrieving space work orders"):
        get_or_404(db, space_crud, space_id, "Space")
        return work_order_crud.get_by_space(db, space_id)


def get_work_orders_by_assignee(db: Session, user_id: UUID):
    with handle_errors(db, "retrieving assigned work orders"):
        get_user_or_404(db, user_id)
        return work_order_crud.get_by_assignee(db, user_id)


def get_work_orders_by_requester(db: Session, user_id: UUID):
    with handle_errors(db, "retrieving requested work orders"):
        get_user_or_404(db, user_id)
        return work_order_crud.get_by_requester(db, user_id)


# ---------------- Comments ----------------
def get_comments(db: Session, work_order_id: UUID):
    with handle_errors(db, "retrieving work order comments"):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        return work_order_comment_crud.get_for_work_order(db, work_order_id)


def add_comment(db: Session, work_order_id: UUID, comment: WorkOrderCommentCreate, current_user: UserToken):
    with handle_errors(db, "adding work order comment", commit=True):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        data = comment.model_dump(exclude_unset=True)
        data.update({"work_order_id": work_order_id, "user_id": UUID(current_user.user_id)})
        return work_order_comment_crud.create(db, data)


def remove_comment(db: Session, work_order_id: UUID, comment_id: UUID):
    with handle_errors(db, "removing work order comment", commit=True):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        if not work_order_comment_crud.get_in_work_order(db, work_order_id, comment_id):
            raise NotFoundError("Comment not found")
        return work_order_comment_crud.delete(db, comment_id)


# ---------------- Attachments ----------------
def get_attachments(db: Session, work_order_id: UUID):
    with handle_errors(db, "retrieving work order attachments"):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        return work_order_attachment_crud.get_for_work_order(db, work_order_id)


def add_attachment(db: Session, work_order_id: UUID, attachment: WorkOrderAttachmentCreate,
                   current_user: UserToken):
    with handle_errors(db, "adding work order attachment", commit=True):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        data = attachment.model_dump(exclude_unset=True)
        data.update({"work_order_id": work_order_id, "user_id": UUID(current_user.user_id)})
        return work_order_attachment_crud.create(db, data)


def remove_attachment(db: Session, work_order_id: UUID, attachment_id: UUID):
    with handle_errors(db, "removing work order attachment", commit=True):
        get_or_404(db, work_order_crud, work_order_id, "Work order")
        if not work_order_attachment_crud.get_in_work_order(db, work_order_id, attachment_id):
            raise NotFoundError("Attachment not found")
        return work_order_attachment_crud.delete(db, attachment_id)
