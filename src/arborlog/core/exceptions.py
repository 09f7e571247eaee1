class SinkError(Exception):
    def __init__(self, sink_name, reason, details=None):
        self.sink_name = sink_name
        self.reason = reason
        self.details = details
        super().__init__(f"[{sink_name}] {reason}")

class SinkBindError(SinkError):
    pass

class SinkOpenError(SinkError):
    pass

class SinkConfigError(ValueError):
    pass
