"""Tool descriptor shared by every tool.

A :class:`Tool` bundles what a host needs to expose an operation to callers:
a stable ``method`` identifier, a human-readable name and description, the
pydantic model describing its arguments, and the coroutine that runs it.
The argument model is chosen once, when the tool is built from a
:class:`~apisample.models.ToolContext`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from apisample.exceptions import InvalidUsageError


@dataclass(frozen=True)
class Tool:
    """An invokable tool.

    Attributes:
        method: Stable identifier, e.g. ``search-api-operations``.
        name: Display name.
        description: Help text, including the argument list.
        parameters: Pydantic model validating the arguments.
        run: Coroutine called with the validated arguments.
    """

    method: str
    name: str
    description: str
    parameters: type[BaseModel]
    run: Callable[[BaseModel], Awaitable[str]]

    @property
    def parameter_names(self) -> list[str]:
        """Argument names in declaration order."""
        return list(self.parameters.model_fields)

    async def execute(self, params: dict[str, Any]) -> str:
        """Validate *params* against :attr:`parameters` and run the tool.

        Raises:
            InvalidUsageError: If *params* do not match the argument model.
        """
        try:
            validated = self.parameters.model_validate(params)
        except ValidationError as exc:
            raise InvalidUsageError(f"Invalid arguments for {self.method}: {exc}") from exc
        return await self.run(validated)
