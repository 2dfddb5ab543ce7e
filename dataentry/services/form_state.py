"""Transient contents of the Name and Age fields."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FormState:
    name: str = ""
    age: str = ""

    def read_name(self) -> str:
        return self.name

    def read_age(self) -> str:
        return self.age

    def update(self, name: str | None = None, age: str | None = None) -> None:
        if name is not None:
            self.name = name
        if age is not None:
            self.age = age

    def clear(self) -> None:
        self.name = ""
        self.age = ""
