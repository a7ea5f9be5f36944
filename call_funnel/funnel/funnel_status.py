from enum import Enum


class FunnelStatus(Enum):
    OPEN = "OPEN"
    HELD = "HELD"
