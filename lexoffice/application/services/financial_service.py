"""
Financial service orchestrator.

Fees (optionally split into monthly installments), expenses and the
office's revenue dashboard. Amounts are integer centavos.

Dependencies: lexoffice.boundary.db.CRUD, lexoffice.core.financial
System role: Office billing use case orchestration
"""

import calendar
import logging
import math
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.application.services.references import check_references
from lexoffice.boundary.db.CRUD.financial_crud import expense_crud, fee_crud
from lexoffice.boundary.db.models import ExpenseModel, FeeModel
from lexoffice.core.enums import ExpenseCategory, FeeStatus, FeeType
from lexoffice.core.exceptions import NotFoundError, PreconditionFailedError, ValidationError
from lexoffice.core.financial import fee_installments, monthly_fee_breakdown
from lexoffice.core.restructuring.payments import add_months

logger = logging.getLogger(__name__)


def _links(record: FeeModel | ExpenseModel) -> dict:
    case = record.case
    project = record.project
    return {
        "case": {
            "id": case.id,
            "case_number": case.case_number,
            "client_name": case.client.name if case.client else None,
        }
        if case is not None
        else None,
        "project": {"id": project.id, "code": project.code, "title": project.title} if project is not None else None,
    }


def _record_dict(record: FeeModel | ExpenseModel) -> dict:
    return {**record.to_dict(), **_links(record)}


def _page(items: list[dict], total: int, page: int, limit: int) -> dict:
    return {"items": items, "total": total, "page": page, "pages": math.ceil(total / limit) if total else 0}


class FinancialService:
    """Fees, expenses and the financial dashboard."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def dashboard(self, start: date | None = None, end: date | None = None, today: date | None = None) -> dict:
        """
        Revenue, receivables, expenses and default for a period.

        The period defaults to the current month. Revenue counts fees paid
        within the period and expenses count those dated within it;
        receivable and overdue are the open totals regardless of period.
        The monthly breakdown covers fees due in the last six months.

        Returns:
            dict: start, end, revenue, receivable, expenses, result,
                overdue and monthly
        """
        today = today or date.today()
        start = start or today.replace(day=1)
        end = end or today.replace(day=calendar.monthrange(today.year, today.month)[1])
        if end < start:
            raise ValidationError("end must not be before start", field="end")

        revenue = await fee_crud.total(
            self.db, FeeModel.status == FeeStatus.PAID, FeeModel.paid_date >= start, FeeModel.paid_date <= end
        )
        receivable = await fee_crud.total(self.db, FeeModel.status == FeeStatus.PENDING)
        overdue = await fee_crud.total(self.db, FeeModel.status == FeeStatus.OVERDUE)
        expenses = await expense_crud.total_between(self.db, start, end)
        recent = await fee_crud.list_due_since(self.db, add_months(today.replace(day=1), -5))

        return {
            "start": start,
            "end": end,
            "revenue": revenue,
            "receivable": receivable,
            "expenses": expenses,
            "result": revenue - expenses,
            "overdue": overdue,
            "monthly": monthly_fee_breakdown(recent),
        }

    # Fees

    async def list_fees(
        self,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        status: FeeStatus | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> dict:
        items, total = await fee_crud.search(
            self.db, case_id=case_id, project_id=project_id, status=status, page=page, limit=limit
        )
        return _page([_record_dict(f) for f in items], total, page, limit)

    async def get_fee(self, fee_id: UUID) -> dict:
        fee = await fee_crud.get_detail(self.db, fee_id)
        if fee is None:
            raise NotFoundError("Fee", fee_id)
        return _record_dict(fee)

    async def create_fee(
        self,
        type: FeeType,
        description: str,
        amount: int,
        due_date: date,
        installments: int = 1,
        **fields,
    ) -> dict:
        """
        Register a fee, one row per installment.

        Returns:
            dict: created (row count) and items (the new fees, first due first)
        """
        await check_references(self.db, fields)
        ids = []
        for part in fee_installments(amount, installments, due_date, description):
            fee = await fee_crud.create(
                self.db,
                type=type,
                description=part.description,
                amount=part.amount,
                due_date=part.due_date,
                installments=installments,
                installment_number=part.number,
                **fields,
            )
            ids.append(fee.id)

        logger.info(
            "Fee created",
            extra={"type": type.value, "amount": amount, "installments": installments},
        )
        return {"created": len(ids), "items": [await self.get_fee(fee_id) for fee_id in ids]}

    async def update_fee(self, fee_id: UUID, **fields) -> dict:
        if not await fee_crud.exists(self.db, fee_id):
            raise NotFoundError("Fee", fee_id)
        await check_references(self.db, fields)
        await fee_crud.update_by_id(self.db, fee_id, **fields)
        return await self.get_fee(fee_id)

    async def mark_fee_paid(self, fee_id: UUID, paid_date: date | None = None) -> dict:
        """
        Mark a fee paid on paid_date (today by default).

        Raises:
            PreconditionFailedError: If the fee was cancelled
        """
        fee = await fee_crud.get_by_id(self.db, fee_id)
        if fee is None:
            raise NotFoundError("Fee", fee_id)
        if fee.status == FeeStatus.CANCELLED:
            raise PreconditionFailedError("Cancelled fees cannot be paid", {"fee_id": str(fee_id)})

        fee.status = FeeStatus.PAID
        fee.paid_date = paid_date or date.today()
        await self.db.flush()
        logger.info("Fee paid", extra={"fee_id": str(fee_id), "amount": fee.amount})
        return await self.get_fee(fee_id)

    async def delete_fee(self, fee_id: UUID) -> None:
        if not await fee_crud.delete_by_id(self.db, fee_id):
            raise NotFoundError("Fee", fee_id)
        logger.info("Fee deleted", extra={"fee_id": str(fee_id)})

    # Expenses

    async def list_expenses(
        self,
        case_id: UUID | None = None,
        project_id: UUID | None = None,
        category: ExpenseCategory | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> dict:
        items, total = await expense_crud.search(
            self.db, case_id=case_id, project_id=project_id, category=category, page=page, limit=limit
        )
        return _page([_record_dict(e) for e in items], total, page, limit)

    async def get_expense(self, expense_id: UUID) -> dict:
        expense = await expense_crud.get_detail(self.db, expense_id)
        if expense is None:
            raise NotFoundError("Expense", expense_id)
        return _record_dict(expense)

    async def create_expense(self, **fields) -> dict:
        await check_references(self.db, fields)
        expense = await expense_crud.create(self.db, **fields)
        logger.info(
            "Expense created",
            extra={"expense_id": str(expense.id), "category": expense.category.value, "amount": expense.amount},
        )
        return await self.get_expense(expense.id)

    async def mark_expense_reimbursed(self, expense_id: UUID, reimbursed_date: date | None = None) -> dict:
        """
        Record that the client reimbursed an expense.

        Raises:
            ValidationError: If the expense is not reimbursable
        """
        expense = await expense_crud.get_by_id(self.db, expense_id)
        if expense is None:
            raise NotFoundError("Expense", expense_id)
        if not expense.reimbursable:
            raise ValidationError("Expense is not reimbursable", field="reimbursable")

        expense.reimbursed = True
        expense.reimbursed_date = reimbursed_date or date.today()
        await self.db.flush()
        logger.info("Expense reimbursed", extra={"expense_id": str(expense_id)})
        return await self.get_expense(expense_id)

    async def delete_expense(self, expense_id: UUID) -> None:
        if not await expense_crud.delete_by_id(self.db, expense_id):
            raise NotFoundError("Expense", expense_id)
        logger.info("Expense deleted", extra={"expense_id": str(expense_id)})
