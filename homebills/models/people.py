from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    color: str = ""  # Display tag, e.g. "bg-blue-500"
