"""Host boundary: state sources, renderers, and connections.

Architecture Note:
    host/ is the only stateful layer. The core never reads a store itself;
    a Connection pulls state from a StateSource and pushes decisions to a
    Renderer each time the host calls refresh().
"""

from cfselect.host.connection import Connection, connect
from cfselect.host.local import LocalStateSource, RecordingRenderer
from cfselect.host.protocol import Renderer, StateSource

__all__ = [
    "StateSource",
    "Renderer",
    "LocalStateSource",
    "RecordingRenderer",
    "Connection",
    "connect",
]
