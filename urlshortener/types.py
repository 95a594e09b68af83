from collections.abc import Callable
from typing import Any, TypeAlias


# Type aliases for configuration documents
ConfigDocument: TypeAlias = dict[str, Any]
ManagerConfig: TypeAlias = dict[str, Any]

# Type aliases for injectable manager collaborators
ShortcodeGenerator: TypeAlias = Callable[[int], str]
LengthPicker: TypeAlias = Callable[[int, int], int]
