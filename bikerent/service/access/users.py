from typing import Optional, Iterable

from bikerent.models import User


def get_user(state, user_id: str) -> Optional[User]:
    return next((user for user in state.users if user.id == user_id), None)


def find_duplicates(users: Iterable[User]) -> Optional[str]:
    """
    Checks a collection of users for usernames or emails used twice, ignoring case.

    :return: A description of the first duplicate, or None.
    """
    usernames, emails = {}, {}
    for user in users:
        for seen, value, kind in ((usernames, user.username, "username"), (emails, user.email, "email")):
            key = value.lower()
            if key in seen:
                return f'Duplicate {kind} "{value}" (users {seen[key]} and {user.id}).'
            seen[key] = user.id
    return None
