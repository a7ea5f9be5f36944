from typing import Any, Dict

import msgspec
from msgspec import structs

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    message: str | None = None
    tags: set[str] = msgspec.field(
        default_factory=set,
    )
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        # Context keys (caller location, timestamp, errors) shadow
        # entry fields of the same name.
        values = structs.asdict(self)
        values["level"] = self.level.value
        values["tags"] = ",".join(sorted(self.tags))

        if context:
            values.update(context)

        return template.format(**values)
