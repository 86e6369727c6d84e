from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LinkedContent(Protocol):
    """
    Content that a menu item can link to, and fall back to for any attribute
    the menu item leaves empty (e.g. its title or link).
    """

    def has_computed(self, name: str) -> bool:
        """
        Returns True if `name` is calculated by a method rather than stored
        """
        ...

    def invoke_computed(self, name: str) -> Any: ...

    def read_field(self, name: str) -> Any:
        """
        Returns the stored value of `name`, or None if there is no such field
        """
        ...
