from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Constraint(BaseModel):
    """A named validation rule handed to the rendering framework.

    Subclasses declare a ``type`` literal equal to the identifier layout
    authors use to reference them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
