from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictStr

PrimaryType = Union[str, int, float, bytes, bool]


class FunnelEnv(BaseModel):
    FUNNEL_NAME: StrictStr = "default"
    FUNNEL_LOG_LEVEL: Literal[
        "trace",
        "debug",
        "info",
        "warn",
        "error",
        "critical",
        "fatal",
    ] = "info"
    FUNNEL_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    FUNNEL_LOG_DIRECTORY: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "FUNNEL_NAME": str,
            "FUNNEL_LOG_LEVEL": lambda value: value.lower(),
            "FUNNEL_LOG_OUTPUT": lambda value: value.lower(),
            "FUNNEL_LOG_DIRECTORY": str,
        }
