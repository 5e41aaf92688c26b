"""
Foreign-key checks shared by the services.

Referenced people, users, cases, projects, tasks and OKRs are looked up before a
write so a dangling id is reported as not found instead of failing on the
database constraint.

Dependencies: lexoffice.boundary.db.CRUD
System role: Reference validation for service writes
"""

from typing import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from lexoffice.boundary.db.CRUD.base_crud import BaseCRUD
from lexoffice.boundary.db.CRUD.case_crud import case_crud
from lexoffice.boundary.db.CRUD.person_crud import person_crud
from lexoffice.boundary.db.CRUD.project_crud import project_crud, project_task_crud
from lexoffice.boundary.db.CRUD.team_crud import okr_crud
from lexoffice.boundary.db.CRUD.user_crud import user_crud
from lexoffice.core.exceptions import NotFoundError

REFERENCES: dict[str, tuple[BaseCRUD, str]] = {
    "client_id": (person_crud, "Client"),
    "judge_id": (person_crud, "Judge"),
    "person_id": (person_crud, "Person"),
    "responsible_id": (user_crud, "User"),
    "assignee_id": (user_crud, "User"),
    "user_id": (user_crud, "User"),
    "case_id": (case_crud, "Case"),
    "project_id": (project_crud, "Project"),
    "task_id": (project_task_crud, "Task"),
    "parent_okr_id": (okr_crud, "OKR"),
}


async def check_references(db: AsyncSession, fields: Mapping) -> None:
    """
    Raise NotFoundError for the first referenced id that does not exist.

    Only keys listed in REFERENCES with a non-null value are checked.
    """
    for key, (crud, resource) in REFERENCES.items():
        ref_id = fields.get(key)
        if ref_id is not None and not await crud.exists(db, ref_id):
            raise NotFoundError(resource, ref_id)
