class TimeshapeError(Exception):
    pass


class UnknownTimezoneError(TimeshapeError, ValueError):
    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown timezone identifier: {zone!r}")
        self.zone = zone


class InvalidInstantError(TimeshapeError, ValueError):
    pass
