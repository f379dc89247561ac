"""Connection kinds, states, statistics and configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional


class ConnectionType(enum.Enum):
    """High-level connection category."""

    LOCAL = 0
    REMOTE = 1


class ConnectionBackend(enum.Enum):
    """Explicit transport backend; AUTO lets the platform choose."""

    AUTO = 0
    UNIX_SOCKET = 1
    NAMED_PIPE = 2
    XPC = 3
    WEBRTC = 4


class ConnectionState(enum.Enum):
    """Lifecycle state of a connection."""

    DISCONNECTED = 0
    CONNECTING = 1
    CONNECTED = 2
    DISCONNECTING = 3
    FAILED = 4


@dataclass
class ConnectionStats:
    """Traffic counters; times are milliseconds since the epoch."""

    bytes_sent: int = 0
    bytes_received: int = 0
    messages_sent: int = 0
    messages_received: int = 0
    connect_time: int = 0
    last_activity_time: int = 0


@dataclass
class WebRTCConfig:
    """WebRTC-specific settings."""

    ice_servers: List[str] = field(default_factory=list)
    proxy_server: str = ""
    bind_address: str = ""
    port_range_begin: int = 0
    port_range_end: int = 0
    max_message_size: int = 256 * 1024
    enable_ice_tcp: bool = False


@dataclass
class SignalingCallbacks:
    """Callbacks that carry WebRTC signaling to the peer.

    ``on_local_description(type, sdp)`` and ``on_local_candidate(candidate, mid)``.
    """

    on_local_description: Optional[Callable[[str, str], None]] = None
    on_local_candidate: Optional[Callable[[str, str], None]] = None


@dataclass
class ConnectionConfig:
    """Configuration for opening a connection.

    A negative ``recv_idle_poll_ms`` means a fixed sleep when idle; socket
    buffer sizes of 0 leave the OS default.
    """

    type: ConnectionType = ConnectionType.LOCAL
    backend: ConnectionBackend = ConnectionBackend.AUTO
    endpoint: str = ""
    connect_timeout_ms: int = 5000
    send_poll_timeout_ms: int = 1000
    send_max_polls: int = 100
    recv_idle_poll_ms: int = -1
    max_message_size: int = 16 * 1024 * 1024
    socket_send_buf: int = 0
    socket_recv_buf: int = 0
    webrtc_config: WebRTCConfig = field(default_factory=WebRTCConfig)
    signaling_callbacks: SignalingCallbacks = field(default_factory=SignalingCallbacks)
    data_channel_label: str = "entropy-data"
    xpc_max_message_size: int = 64 * 1024 * 1024
    xpc_reply_timeout_ms: int = 5000
    xpc_service_name: Optional[str] = None