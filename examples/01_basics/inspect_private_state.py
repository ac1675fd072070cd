#!/usr/bin/env python3
"""
Inspecting private state of a transaction manager.

This example demonstrates:
- Reading and writing name-mangled fields declared by a base class
- Invoking a private method of a base class
- Tracing member resolution with the /reflective logger

Usage:
    python inspect_private_state.py
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from reflective import AccessorConfig, MemberNotFoundError, ReflectiveAccessor


class AbstractTransactionManager:
    def __init__(self) -> None:
        self.__status = "idle"
        self.__enlisted: list[str] = []

    def __enlist(self, resource: str) -> int:
        self.__enlisted.append(resource)
        return len(self.__enlisted)


class XATransactionManager(AbstractTransactionManager):
    pass


def main() -> int:
    accessor = ReflectiveAccessor(AccessorConfig(log_level="trace"))
    lg = accessor.lg
    manager = XATransactionManager()

    accessor.set_property(manager, "status", "active")
    lg.info("status", extra={"value": accessor.get_property(manager, "status")})

    count = accessor.method_invoke(manager, "enlist", "orders-db")
    lg.info("enlisted", extra={"count": count})

    try:
        accessor.method_invoke(manager, "enlist", 42)
    except MemberNotFoundError as e:
        lg.info("no matching signature", extra={"error": e})

    return 0


if __name__ == "__main__":
    sys.exit(main())
