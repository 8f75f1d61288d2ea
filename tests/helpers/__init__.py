from .mocks import MockTransport, MockSigner, make_result

__all__ = [
    "MockTransport",
    "MockSigner",
    "make_result",
]
