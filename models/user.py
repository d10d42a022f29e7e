"""
models/user.py
--------------
Domain model for user records stored in the `users` table.
"""

from dataclasses import dataclass


@dataclass
class UserRecord:
    """
    Represents a single row of the users table.

    Attributes:
        id: Database primary key, assigned by the store on insert.
        name: Display name.
        age: Age in years.
    """
    id: int
    name: str
    age: int

    def __str__(self) -> str:
        return f"id: {self.id}, name: {self.name}, age: {self.age}"
