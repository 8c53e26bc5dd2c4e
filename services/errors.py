class GatewayError(Exception):
    """Base class for every failure the gateway reports to a caller."""


class InvalidAddress(GatewayError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid Ethereum address: {text!r}")


class MissingConfiguration(GatewayError):
    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} is not set")


class UpstreamRpcFailure(GatewayError):
    """
    A read against the node failed.

    The original library exception is chained as ``__cause__``.
    Subclasses only exist to make logs more useful; callers
    handle them all the same way.
    """

    def __init__(self, operation: str, reason: str = "upstream call failed"):
        self.operation = operation
        super().__init__(f"{operation}: {reason}")


class RpcTransportError(UpstreamRpcFailure):
    pass


class RpcNodeError(UpstreamRpcFailure):
    pass


class RpcDecodeError(UpstreamRpcFailure):
    pass


class ContractCallError(UpstreamRpcFailure):
    pass
