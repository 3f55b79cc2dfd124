"""Stub VPP engine and sample reports shared by the tests."""

import os
import socketserver
import tempfile
import threading

# Telnet negotiation VPP sends when a client connects: WILL ECHO, WILL SGA,
# DO TTYPE, then a terminal-type sub-negotiation request.
NEGOTIATION = bytes([255, 251, 1, 255, 251, 3, 255, 253, 24, 255, 250, 24, 1, 255, 240])

SHOW_INTERFACE = """\
              Name               Idx    State  MTU (L3/IP4/IP6/MPLS)     Counter          Count
GigabitEthernet0/8/0              1      up          1500/0/0/0     rx packets                    12
                                                                    rx bytes                    1048
loop0                             2      up          9000/0/0/0
local0                            0     down          0/0/0/0
"""

SHOW_INTERFACE_ADDR = """\
GigabitEthernet0/8/0 (up):
  L3 10.0.0.1/24
  L3 10.0.0.2/32
loop0 (up):
local0 (dn):
"""

SHOW_BOND_DETAILS = """\
BondEthernet0
  mode: lacp
  load balance: l2
  number of active members: 1
    GigabitEthernet0/9/0
  number of members: 2
    GigabitEthernet0/9/0
    GigabitEthernet0/a/0
  device instance: 0
  interface id: 0
  sw_if_index: 5
  hw_if_index: 5
"""

SHOW_LCP = """\
lcp default netns '<unset>'
lcp lcp-auto-subint off
lcp lcp-sync on
itf-pair: [0] GigabitEthernet0/8/0 tap1 eth0 1 type tap netns dataplane
"""

SHOW_IP_FIB = """\
ipv4-VRF:0, fib_index:0, flow hash:[src dst sport dport proto flowlabel ] epoch:0 flags:none locks:[adjacency:1, default-route:1, ]
0.0.0.0/0
  unicast-ip4-chain
  [@0]: dpo-load-balance: [proto:ip4 index:1 buckets:1 uRPF:0 to:[0:0]]
    [0] [@0]: dpo-drop ip4
10.0.0.0/24
  unicast-ip4-chain
  [@0]: dpo-load-balance: [proto:ip4 index:15 buckets:1 uRPF:14 to:[0:0]]
    [0] [@4]: ipv4-glean: [src:10.0.0.0/24] GigabitEthernet0/8/0: mtu:9000 next:1 flags:[] ffffffffffff00505600000a0806
10.0.0.1/32
  unicast-ip4-chain
  [@0]: dpo-load-balance: [proto:ip4 index:16 buckets:1 uRPF:15 to:[0:0]]
    [0] [@2]: dpo-receive: 10.0.0.1 on GigabitEthernet0/8/0
192.168.0.0/16
  unicast-ip4-chain
  [@0]: dpo-load-balance: [proto:ip4 index:20 buckets:1 uRPF:19 to:[0:0]]
    [0] [@5]: ipv4 via 10.0.0.254 GigabitEthernet0/8/0: mtu:9000 next:5 flags:[] 00505600000b00505600000a0800
"""

REPORTS = {
    "show interface": SHOW_INTERFACE,
    "show interface addr": SHOW_INTERFACE_ADDR,
    "show bond details": SHOW_BOND_DETAILS,
    "show lcp": SHOW_LCP,
    "show ip fib": SHOW_IP_FIB,
}


class FakeVPP:
    """In-process executor: records commands and answers from a reply table."""

    def __init__(self, replies=None, default=""):
        self.replies = dict(REPORTS if replies is None else replies)
        self.default = default
        self.commands = []

    def __call__(self, command: str) -> str:
        self.commands.append(command)
        return self.replies.get(command, self.default)


class _Handler(socketserver.StreamRequestHandler):

    def handle(self):
        line = self.rfile.readline().decode().strip()
        self.server.received.append(line)
        reply = self.server.replies.get(line, "")
        self.wfile.write(NEGOTIATION + reply.encode())


class _Server(socketserver.ThreadingMixIn, socketserver.UnixStreamServer):
    daemon_threads = True


class StubEngine:
    """A Unix-socket server that answers one command per connection."""

    def __init__(self, replies=None):
        self.directory = tempfile.mkdtemp(prefix="vppsh-")
        self.path = os.path.join(self.directory, "cli.sock")
        self.server = _Server(self.path, _Handler)
        self.server.replies = dict(REPORTS if replies is None else replies)
        self.server.received = []
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def received(self):
        return self.server.received

    def start(self):
        self.thread.start()
        return self

    def stop(self):
        self.server.shutdown()
        self.server.server_close()
        os.unlink(self.path)
        os.rmdir(self.directory)
