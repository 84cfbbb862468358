"""Exceptions raised by the scan engine."""


class ScanError(Exception):
    """A single-file scan could not be executed."""


class NotFoundError(ScanError):
    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class UnknownRuleError(ScanError):
    def __init__(self, rule_id: str):
        super().__init__(f"Unknown rule: {rule_id}")
        self.rule_id = rule_id
