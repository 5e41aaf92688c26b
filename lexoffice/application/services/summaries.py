"""
Compact dict views of related records.

Shared by services that embed a person or user next to the record they
return (case client, project lawyer, recovery debtor).

Dependencies: lexoffice.boundary.db.models
System role: Nested response shaping
"""

from lexoffice.boundary.db.models import PersonModel, UserModel


def person_summary(person: PersonModel | None) -> dict | None:
    if person is None:
        return None
    return {
        "id": person.id,
        "name": person.name,
        "type": person.type,
        "subtype": person.subtype,
        "tax_id": person.tax_id,
    }


def user_summary(user: UserModel | None) -> dict | None:
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role}
