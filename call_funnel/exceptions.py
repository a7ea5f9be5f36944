class FunnelError(Exception):
    pass


class EventLoopRequiredError(FunnelError):
    pass


class SettlementError(FunnelError):
    pass
